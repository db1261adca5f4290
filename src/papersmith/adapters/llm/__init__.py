"""LLM adapters."""

from ...config import LLMConfig, NamingConfig
from ...domain.errors import ConfigurationError
from ...ports.llm import LLMPort
from .openai_responses import OpenAIResponsesAdapter

__all__ = ["OpenAIResponsesAdapter", "create_llm_adapter"]


def create_llm_adapter(config: LLMConfig, naming: NamingConfig) -> LLMPort:
    """Create LLM adapter based on configuration."""
    if config.api_key is None or not config.api_key.get_secret_value():
        raise ConfigurationError(
            "No API key configured. Set OPENAI_API_KEY or PAPERSMITH_API_KEY."
        )
    try:
        return OpenAIResponsesAdapter(
            api_key=config.api_key.get_secret_value(),
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout,
            fallback_date=naming.fallback_date,
            fallback_label=naming.fallback_label,
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
