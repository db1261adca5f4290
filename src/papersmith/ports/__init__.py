"""Ports - interfaces for external dependencies."""

from .llm import LLMPort
from .storage import StoragePort

__all__ = ["LLMPort", "StoragePort"]
