"""Provider factory functions.

Singleton access to the configured LLM provider.
"""

from app.providers.config import ProviderConfig
from app.providers.errors import ProviderConfigurationError
from app.providers.llm.base import LLMProvider
from app.providers.llm.gemini_adapter import GeminiAdapter

_llm_provider: LLMProvider | None = None


def get_llm_provider(config: ProviderConfig | None = None) -> LLMProvider:
    """Get or create the LLM provider singleton.

    The first call sets the config (app startup); later calls reuse the
    instance and its HTTP connections.

    Args:
        config: Optional provider configuration. If None and no provider
            exists, loads from environment.

    Returns:
        LLMProvider instance.

    Raises:
        ProviderConfigurationError: If the configured provider is unknown
            or its defaults cannot be parsed.
    """
    global _llm_provider

    if _llm_provider is None:
        if config is None:
            config = ProviderConfig.from_env()

        if config.llm_provider == "gemini":
            _llm_provider = GeminiAdapter(config)
        else:
            raise ProviderConfigurationError(
                f"Unknown LLM provider: {config.llm_provider}"
            )

    return _llm_provider


def reset_providers() -> None:
    """Reset the provider singleton.

    Used in tests to ensure isolation between test cases.
    """
    global _llm_provider
    _llm_provider = None
