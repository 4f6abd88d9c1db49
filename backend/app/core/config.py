"""Application configuration loaded from environment variables.

Settings for the onboarding API, the Gemini credential and the WhatsApp
dispatch target. Uses pydantic-settings for validation and .env file support.
"""

import re

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DIGIT_RE = re.compile(r"\d")

DEFAULT_ADMIN_WHATSAPP_NUMBER = "+6287725071919"
"""Petanikopiku admin number that receives new seller registrations."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # CORS
    # Default allows localhost:3000 for the form front end in development
    allowed_origins: list[str] = ["http://localhost:3000"]

    # LLM Provider
    # Read by ProviderConfig.from_env() when GOOGLE_API_KEY is not exported
    google_api_key: str = ""

    # Dispatch
    admin_whatsapp_number: str = DEFAULT_ADMIN_WHATSAPP_NUMBER
    whatsapp_base_url: str = "https://wa.me"

    # Media capture
    ktp_photo_max_size_mb: int = 5

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # Rate Limiting
    # Limits LLM-calling endpoints (assistant, submit) to prevent cost explosion
    # Format: "count/period" (e.g., "10/minute", "100/hour")
    rate_limit_llm: str = "10/minute"
    rate_limit_enabled: bool = True  # Disable for testing

    @property
    def ktp_photo_max_size_bytes(self) -> int:
        """Upload size limit for KTP photos in bytes."""
        return self.ktp_photo_max_size_mb * 1024 * 1024

    @model_validator(mode="after")
    def check_settings(self) -> "Settings":
        """Validate cross-field configuration.

        Checks:
        - The admin WhatsApp number contains at least one digit
        - The photo size limit is positive
        - CORS does not use a wildcard origin
        """
        if not _DIGIT_RE.search(self.admin_whatsapp_number):
            msg = (
                "ADMIN_WHATSAPP_NUMBER must contain digits. "
                f"Got: {self.admin_whatsapp_number!r}"
            )
            raise ValueError(msg)

        if self.ktp_photo_max_size_mb <= 0:
            msg = (
                "KTP_PHOTO_MAX_SIZE_MB must be positive. "
                f"Got: {self.ktp_photo_max_size_mb}"
            )
            raise ValueError(msg)

        if "*" in self.allowed_origins:
            msg = (
                "ALLOWED_ORIGINS must not contain '*' (wildcard). "
                "List the form front end origin(s) explicitly."
            )
            raise ValueError(msg)

        return self


settings = Settings()
