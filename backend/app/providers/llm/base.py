"""Abstract base class and types for LLM providers.

The onboarding form makes two kinds of remote calls (seller assistance and
registration summary); both go through this provider-agnostic interface so
tests can swap in MockLLMProvider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.providers.config import ProviderConfig


class TaskType(Enum):
    """Task types for model routing."""

    SELLER_ASSISTANCE = "seller_assistance"
    REGISTRATION_SUMMARY = "registration_summary"


@dataclass
class LLMMessage:
    """Provider-agnostic message format.

    Attributes:
            role: Message role ("system", "user", "assistant").
            content: Text content.
    """

    role: str
    content: str | None = None


@dataclass
class LLMResponse:
    """Provider-agnostic response format.

    Attributes:
            content: Text response (None if the model returned nothing).
            model: Actual model used (for logging).
            input_tokens: Number of input tokens used.
            output_tokens: Number of output tokens generated.
            finish_reason: Why generation stopped ("STOP", "MAX_TOKENS", ...).
            latency_ms: Response time in milliseconds.
    """

    content: str | None
    model: str
    input_tokens: int
    output_tokens: int
    finish_reason: str
    latency_ms: float


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize with provider configuration.

        Args:
                config: Provider configuration including API key and defaults.
        """
        self.config = config

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider identifier (e.g., 'gemini')."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Generate a completion.

        Args:
                messages: Conversation as list of LLMMessage. A "system" message
                        becomes the provider's system instruction.
                task: Task type for model routing.
                max_tokens: Override default max tokens.
                temperature: Override default temperature.

        Returns:
                LLMResponse with content.

        Raises:
                ProviderError: On API failure.
        """
        ...

    @abstractmethod
    def get_model_for_task(self, task: TaskType) -> str:
        """Return the model identifier for a given task.

        Args:
                task: The task type to get the model for.

        Returns:
                Model identifier string (e.g., "gemini-3-flash-preview").
        """
        ...
