"""WhatsApp dispatch of a completed registration.

Builds a wa.me deep link carrying the registration summary and hands it to an
opener. Dispatch is fire-and-forget: success means the link was produced and
opened, not that the admin received anything.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote

from app.providers.llm.base import LLMProvider
from app.services.registration_session import RegistrationSession
from app.services.registration_summary import (
    format_fallback_summary,
    generate_professional_summary,
)

logger = logging.getLogger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"

# Characters JavaScript's encodeURIComponent leaves alone, beyond the
# alphanumerics and "_.-~" that quote() never encodes
_URI_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a submission.

    Attributes:
        message: Summary text that was sent.
        whatsapp_url: Deep link carrying the message.
        used_fallback: True if the local template replaced the AI summary.
    """

    message: str
    whatsapp_url: str
    used_fallback: bool


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way encodeURIComponent does (UTF-8)."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_whatsapp_link(
    recipient: str,
    text: str,
    base_url: str = WHATSAPP_BASE_URL,
) -> str:
    """Build a WhatsApp click-to-chat link.

    Args:
        recipient: Phone number in international format; a leading "+" is
            dropped.
        text: Message to prefill.
        base_url: Deep link host.

    Returns:
        URL like "https://wa.me/6287725071919?text=A%26B".
    """
    number = recipient.removeprefix("+")
    return f"{base_url.rstrip('/')}/{number}?text={encode_uri_component(text)}"


async def submit_registration(
    session: RegistrationSession,
    recipient: str,
    provider: LLMProvider | None = None,
    open_link: Callable[[str], object] | None = None,
    base_url: str = WHATSAPP_BASE_URL,
) -> DispatchResult:
    """Compose the registration summary and dispatch it to WhatsApp.

    Sets session.is_submitting for the duration. The record is not cleared
    afterwards. Nothing checks whether the seller navigated away while the
    summary was being generated.

    Args:
        session: The onboarding session.
        recipient: Admin WhatsApp number.
        provider: LLM provider; defaults to the factory singleton.
        open_link: Called with the final URL (e.g., webbrowser.open_new_tab).
            When None the caller is expected to open the returned URL.
        base_url: Deep link host.

    Returns:
        DispatchResult with the message and link.
    """
    session.is_submitting = True
    try:
        summary = await generate_professional_summary(session.data, provider)
        used_fallback = summary is None
        message = (
            format_fallback_summary(session.data) if summary is None else summary
        )

        url = build_whatsapp_link(recipient, message, base_url)
        if open_link is not None:
            open_link(url)

        logger.info(
            "Registration dispatched (fallback=%s, %d chars)",
            used_fallback,
            len(message),
        )
    finally:
        session.is_submitting = False

    return DispatchResult(
        message=message, whatsapp_url=url, used_fallback=used_fallback
    )
