"""Provider error taxonomy.

Adapters translate SDK exceptions into these classes so the seller assistant
and summary services can recover from any provider failure with a single
``except ProviderError`` clause.
"""


__all__ = [
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "ModelNotFoundError",
    "ContentFilterError",
    "ContextLengthError",
    "TransientError",
    "ProviderConfigurationError",
]


class ProviderError(Exception):
    """Base class for all provider errors.

    All provider-specific exceptions inherit from this class.
    """

    pass


class RateLimitError(ProviderError):
    """Quota or rate limit exceeded."""

    def __init__(self, message: str, retry_after_seconds: float | None = None):
        """Initialize RateLimitError.

        Args:
            message: Error description from the provider.
            retry_after_seconds: Optional hint from provider on when to retry.
        """
        super().__init__(message)
        self.retry_after_seconds = retry_after_seconds


class AuthenticationError(ProviderError):
    """Missing, invalid or expired GOOGLE_API_KEY."""

    pass


class ModelNotFoundError(ProviderError):
    """Configured model doesn't exist or isn't accessible with this key."""

    pass


class ContentFilterError(ProviderError):
    """Prompt or answer blocked by the provider's safety filter."""

    pass


class ContextLengthError(ProviderError):
    """Input exceeded the model's context window."""

    pass


class TransientError(ProviderError):
    """Temporary failure (network, server overload, 5xx)."""

    pass


class ProviderConfigurationError(ProviderError):
    """Unknown LLM_PROVIDER or unparseable provider defaults."""

    pass
