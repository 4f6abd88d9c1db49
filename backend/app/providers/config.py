"""Provider configuration management.

Centralized configuration for the LLM provider used by the seller assistant
and the registration summary.
"""

import os
from dataclasses import dataclass

from app.core.config import settings
from app.providers.errors import ProviderConfigurationError


@dataclass
class ProviderConfig:
    """Centralized provider configuration.

    Attributes:
        llm_provider: Which LLM provider to use (only "gemini" is wired).
        google_api_key: Google AI API key (loaded from environment or .env).
        gemini_model_routing: Override model routing for Gemini, keyed by
            TaskType value.
        default_max_tokens: Default max output tokens.
        default_temperature: Default sampling temperature.
    """

    llm_provider: str = "gemini"

    # API key (loaded from environment)
    google_api_key: str | None = None

    # Model routing (can override defaults)
    gemini_model_routing: dict[str, str] | None = None

    # Defaults
    default_max_tokens: int = 2048
    default_temperature: float = 0.7

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Load configuration from environment variables.

        GEMINI_MODEL, when set, routes every task to that model.
        GOOGLE_API_KEY falls back to the application settings, which also
        read the .env file.

        Returns:
            ProviderConfig instance with values from environment.

        Raises:
            ProviderConfigurationError: If DEFAULT_MAX_TOKENS or
                DEFAULT_TEMPERATURE is not a number.
        """
        routing = None
        model = os.getenv("GEMINI_MODEL")
        if model:
            routing = {
                "seller_assistance": model,
                "registration_summary": model,
            }

        try:
            max_tokens = int(os.getenv("DEFAULT_MAX_TOKENS", "2048"))
            temperature = float(os.getenv("DEFAULT_TEMPERATURE", "0.7"))
        except ValueError as e:
            raise ProviderConfigurationError(
                f"Invalid provider default: {e}"
            ) from e

        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "gemini"),
            google_api_key=os.getenv("GOOGLE_API_KEY")
            or settings.google_api_key
            or None,
            gemini_model_routing=routing,
            default_max_tokens=max_tokens,
            default_temperature=temperature,
        )
