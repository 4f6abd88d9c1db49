"""Google Gemini LLM adapter.

Uses the unified google-genai SDK. Both onboarding tasks run on the Flash
preview model by default; GEMINI_MODEL overrides the routing.
"""

import time
from typing import TYPE_CHECKING

import structlog
from google import genai
from google.genai import types

from app.providers.errors import (
    AuthenticationError,
    ContentFilterError,
    ContextLengthError,
    ModelNotFoundError,
    ProviderError,
    RateLimitError,
    TransientError,
)
from app.providers.llm.base import (
    LLMMessage,
    LLMProvider,
    LLMResponse,
    TaskType,
)

if TYPE_CHECKING:
    from app.providers.config import ProviderConfig

logger = structlog.get_logger()


DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"

DEFAULT_GEMINI_ROUTING: dict[str, str] = {
    "seller_assistance": DEFAULT_GEMINI_MODEL,
    "registration_summary": DEFAULT_GEMINI_MODEL,
}


def _classify_gemini_error(error: Exception) -> ProviderError:
    """Map Gemini exceptions to internal error taxonomy."""
    error_msg = str(error).lower()
    if "resource" in error_msg and "exhausted" in error_msg:
        return RateLimitError(str(error))
    if "permission" in error_msg or "unauthenticated" in error_msg:
        return AuthenticationError(str(error))
    if "not found" in error_msg and "model" in error_msg:
        return ModelNotFoundError(str(error))
    if "context" in error_msg or "token" in error_msg:
        return ContextLengthError(str(error))
    if "safety" in error_msg or "blocked" in error_msg:
        return ContentFilterError(str(error))
    if "unavailable" in error_msg or "503" in error_msg:
        return TransientError(str(error))
    return ProviderError(str(error))


def _convert_gemini_messages(
    messages: list[LLMMessage],
) -> tuple[str | None, list[types.Content]]:
    """Convert LLMMessages to Gemini format, extracting system instruction."""
    system_instruction = None
    contents: list[types.Content] = []

    for msg in messages:
        if msg.role == "system":
            system_instruction = msg.content
        else:
            role = "model" if msg.role == "assistant" else msg.role
            contents.append(
                types.Content(
                    role=role,
                    parts=[types.Part(text=msg.content or "")],
                )
            )

    return system_instruction, contents


def _parse_gemini_response(response: object) -> tuple[str | None, str]:
    """Parse Gemini response into content and finish_reason."""
    content = None

    if response.candidates:  # type: ignore[attr-defined]
        candidate = response.candidates[0]  # type: ignore[attr-defined]
        if candidate.content and candidate.content.parts:
            texts = [part.text for part in candidate.content.parts if part.text]
            content = "".join(texts) or None
        finish_reason = (
            candidate.finish_reason.name if candidate.finish_reason else "UNKNOWN"
        )
    else:
        finish_reason = "UNKNOWN"

    return content, finish_reason


def _usage_tokens(response: object) -> tuple[int, int]:
    """Read (input, output) token counts; missing metadata counts as zero."""
    usage = getattr(response, "usage_metadata", None)
    if usage is None:
        return 0, 0
    return usage.prompt_token_count or 0, usage.candidates_token_count or 0


class GeminiAdapter(LLMProvider):
    """Google Gemini adapter using unified google-genai SDK."""

    @property
    def provider_name(self) -> str:
        """Return 'gemini' for logging."""
        return "gemini"

    def __init__(self, config: "ProviderConfig") -> None:
        """Initialize Gemini adapter.

        Args:
            config: Provider configuration with Google API key.

        Raises:
            AuthenticationError: If no Google API key is configured.
        """
        super().__init__(config)
        if not config.google_api_key:
            raise AuthenticationError("GOOGLE_API_KEY is not set")
        self.client = genai.Client(api_key=config.google_api_key)
        self.model_routing = {**DEFAULT_GEMINI_ROUTING}
        if config.gemini_model_routing:
            self.model_routing.update(config.gemini_model_routing)

    async def complete(
        self,
        messages: list[LLMMessage],
        task: TaskType,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LLMResponse:
        """Generate completion using Gemini."""
        model_name = self.get_model_for_task(task)
        system_instruction, contents = _convert_gemini_messages(messages)

        gen_config = types.GenerateContentConfig(
            max_output_tokens=max_tokens or self.config.default_max_tokens,
            temperature=(
                temperature
                if temperature is not None
                else self.config.default_temperature
            ),
            system_instruction=system_instruction,
        )

        log = logger.bind(
            provider=self.provider_name, model=model_name, task=task.value
        )
        log.info("llm_request_start", message_count=len(messages))
        started = time.monotonic()

        try:
            response = await self.client.aio.models.generate_content(
                model=model_name,
                contents=contents,  # type: ignore[arg-type]
                config=gen_config,
            )
        except Exception as e:
            error = _classify_gemini_error(e)
            log.error(
                "llm_request_failed",
                error_type=type(e).__name__,
                classified_as=type(error).__name__,
                latency_ms=(time.monotonic() - started) * 1000,
            )
            raise error from e

        latency_ms = (time.monotonic() - started) * 1000
        content, finish_reason = _parse_gemini_response(response)
        input_tokens, output_tokens = _usage_tokens(response)

        log.info(
            "llm_request_complete",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )

        return LLMResponse(
            content=content,
            model=model_name,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            finish_reason=finish_reason,
            latency_ms=latency_ms,
        )

    def get_model_for_task(self, task: TaskType) -> str:
        """Get model for task using routing table.

        Args:
            task: The task type to get the model for.

        Returns:
            Model identifier string (e.g., "gemini-3-flash-preview").
        """
        return self.model_routing.get(task.value, DEFAULT_GEMINI_MODEL)
