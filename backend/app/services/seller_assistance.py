"""Seller assistant service.

Asks Gemini to explain the current onboarding step to the seller in
Indonesian. The assistant is advisory only: any provider failure resolves to a
fixed apology so the seller can keep filling in the form.
"""

import logging

from app.providers import ProviderError, factory
from app.providers.llm.base import LLMMessage, LLMProvider, TaskType
from app.schemas.registration import (
    RegistrationData,
    Step,
    VerificationSnapshot,
)
from app.services.registration_session import RegistrationSession

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

SELLER_ASSISTANCE_QUESTION = (
    "Jelaskan langkah ini dan apa yang harus saya siapkan sebagai pemilik toko?"
)
"""The single question the form's help button asks."""

ASSISTANT_FALLBACK_MESSAGE = (
    "Maaf, saya sedang mengalami kendala teknis. "
    "Silakan lanjutkan pengisian formulir pendaftaran toko Anda."
)
"""Shown whenever the assistant cannot answer."""

_ASSISTANT_TEMPERATURE = 0.7

ASSISTANT_SYSTEM_PROMPT = (
    "Answer briefly and warmly in Indonesian. Help the seller understand why "
    "we need their 'Nama Toko', 'Alamat Toko', 'Estimasi Penjualan', or why we "
    "need their KTP. Address them as 'Mitra Penjual' or 'Pemilik Toko'."
)

ASSISTANT_PROMPT_TEMPLATE = """You are a helpful assistant for Petanikopiku, a coffee commerce platform.
The user is a seller (penjual) registering their store (toko).
Current form context: {context}
User question: {query}"""


# =============================================================================
# Context
# =============================================================================


def build_step_context(step: Step, data: RegistrationData) -> str:
    """Describe the seller's position in the form for the assistant.

    The summary step has no sub-form of its own, so it reports the profile.
    Verification data is reported without the photo bytes.

    Args:
        step: Current onboarding step.
        data: Current registration record.

    Returns:
        Context line with the step name and a JSON snapshot of its sub-record.
    """
    if step is Step.STORE:
        snapshot = data.store.model_dump_json()
    elif step is Step.VERIFICATION:
        snapshot = VerificationSnapshot.from_verification(
            data.verification
        ).model_dump_json()
    else:
        snapshot = data.profile.model_dump_json()
    return f"Seller is at step {step.value}. Data so far: {snapshot}"


# =============================================================================
# Gateway
# =============================================================================


async def get_seller_assistance(
    query: str,
    context: str,
    provider: LLMProvider | None = None,
) -> str:
    """Ask the assistant a question about the current step.

    Never raises for provider failures.

    Args:
        query: The seller's question.
        context: Output of build_step_context().
        provider: LLM provider; defaults to the factory singleton.

    Returns:
        The assistant's answer, or ASSISTANT_FALLBACK_MESSAGE on failure.
    """
    try:
        llm = provider or factory.get_llm_provider()
        response = await llm.complete(
            messages=[
                LLMMessage(role="system", content=ASSISTANT_SYSTEM_PROMPT),
                LLMMessage(
                    role="user",
                    content=ASSISTANT_PROMPT_TEMPLATE.format(
                        context=context, query=query
                    ),
                ),
            ],
            task=TaskType.SELLER_ASSISTANCE,
            temperature=_ASSISTANT_TEMPERATURE,
        )
    except ProviderError as e:
        logger.warning("Seller assistance failed (%s), using fallback", e)
        return ASSISTANT_FALLBACK_MESSAGE

    if not response.content:
        logger.warning("Seller assistance returned no text, using fallback")
        return ASSISTANT_FALLBACK_MESSAGE

    return response.content


async def ask_assistant(
    session: RegistrationSession,
    provider: LLMProvider | None = None,
) -> str:
    """Ask the fixed help question for the session's current step.

    Sets session.is_ai_loading for the duration of the call and stores the
    answer in session.ai_response. There is no guard against a second call
    and no staleness check: whichever answer arrives last is kept.

    Args:
        session: The onboarding session.
        provider: LLM provider; defaults to the factory singleton.

    Returns:
        The answer stored on the session.
    """
    session.is_ai_loading = True
    try:
        context = build_step_context(session.current_step, session.data)
        answer = await get_seller_assistance(
            SELLER_ASSISTANCE_QUESTION, context, provider
        )
        session.ai_response = answer
    finally:
        session.is_ai_loading = False
    return answer
