"""LLM port - interface for document analysis."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import EncodedDocument, ExtractionResult


class LLMPort(ABC):
    """Interface for LLM-based document analysis.

    Usable as a context manager; leaving the block calls ``close()``.
    """

    @abstractmethod
    def analyze(self, document: "EncodedDocument") -> "ExtractionResult":
        """Extract date, category and title from an encoded document.

        Raises InferenceError if no usable answer could be obtained.
        """
        pass

    def close(self) -> None:
        """Release any connections held by the adapter."""

    def __enter__(self) -> "LLMPort":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
