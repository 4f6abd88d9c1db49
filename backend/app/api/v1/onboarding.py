"""Onboarding API router.

Seller registration form backed by the application's single in-memory
session.

Endpoints:
- GET    /: Current session state.
- PATCH  /profile: Merge seller profile fields.
- PATCH  /store: Merge store detail fields.
- PATCH  /verification: Merge the KTP number.
- PUT    /ktp-photo: Upload the KTP photo.
- DELETE /ktp-photo: Remove the KTP photo.
- POST   /next, /back: Step navigation.
- POST   /assistant: Ask the seller assistant about the current step.
- DELETE /assistant: Dismiss the assistant answer.
- POST   /submit: Compose the summary and build the WhatsApp link.
- POST   /reset: Discard the registration and start over.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.api.deps import CurrentSession, reset_registration_session
from app.core.config import settings
from app.core.file_validation import detect_image_type, read_file_with_size_limit
from app.core.rate_limiting import limiter
from app.core.responses import DataResponse
from app.schemas.onboarding import AssistantResponse, SessionState, SubmitResponse
from app.schemas.registration import (
    KtpPhoto,
    SecurityVerificationUpdate,
    SellerProfileUpdate,
    StoreDetailsUpdate,
)
from app.services.media_capture import capture_ktp_photo
from app.services.registration_session import RegistrationSession
from app.services.seller_assistance import ask_assistant
from app.services.whatsapp_dispatch import submit_registration

logger = structlog.get_logger()

router = APIRouter()


def _state(session: RegistrationSession) -> DataResponse[SessionState]:
    return DataResponse(data=SessionState.from_session(session))


@router.get("")
async def get_onboarding(session: CurrentSession) -> DataResponse[SessionState]:
    """Return the current onboarding state."""
    return _state(session)


# =============================================================================
# Record updates
# =============================================================================


@router.patch("/profile")
async def update_profile(
    update: SellerProfileUpdate,
    session: CurrentSession,
) -> DataResponse[SessionState]:
    """Merge seller profile fields. Omitted fields keep their values."""
    session.update_profile(update)
    return _state(session)


@router.patch("/store")
async def update_store(
    update: StoreDetailsUpdate,
    session: CurrentSession,
) -> DataResponse[SessionState]:
    """Merge store detail fields."""
    session.update_store(update)
    return _state(session)


@router.patch("/verification")
async def update_verification(
    update: SecurityVerificationUpdate,
    session: CurrentSession,
) -> DataResponse[SessionState]:
    """Merge the KTP number."""
    session.update_verification(update)
    return _state(session)


@router.put("/ktp-photo")
async def upload_ktp_photo(
    file: Annotated[UploadFile, File(...)],
    session: CurrentSession,
) -> DataResponse[SessionState]:
    """Upload the KTP photo and store it with its preview.

    Args:
        file: Uploaded image.
        session: Current onboarding session.

    Returns:
        Updated session state. If the preview could not be produced the
        state is returned unchanged.

    Raises:
        ValidationError: If the upload is empty, too large or not an image.
    """
    content = await read_file_with_size_limit(
        file, settings.ktp_photo_max_size_bytes
    )
    filename = file.filename or "ktp"
    content_type = detect_image_type(content, filename)

    photo = KtpPhoto(filename=filename, content_type=content_type, content=content)
    await capture_ktp_photo(session, photo)
    return _state(session)


@router.delete("/ktp-photo")
async def remove_ktp_photo(session: CurrentSession) -> DataResponse[SessionState]:
    """Remove the KTP photo and its preview."""
    session.clear_ktp_photo()
    return _state(session)


# =============================================================================
# Navigation
# =============================================================================


@router.post("/next")
async def next_step(session: CurrentSession) -> DataResponse[SessionState]:
    """Advance one step. Empty fields never block the move."""
    session.advance()
    return _state(session)


@router.post("/back")
async def previous_step(session: CurrentSession) -> DataResponse[SessionState]:
    """Go back one step."""
    session.retreat()
    return _state(session)


@router.post("/reset")
async def reset_onboarding(
    session: Annotated[RegistrationSession, Depends(reset_registration_session)],
) -> DataResponse[SessionState]:
    """Discard the registration and start an empty session."""
    logger.info("onboarding_session_reset")
    return _state(session)


# =============================================================================
# Remote calls
# =============================================================================


@router.post("/assistant")
@limiter.limit(settings.rate_limit_llm)
async def ask_seller_assistant(
    request: Request,  # noqa: ARG001
    session: CurrentSession,
) -> DataResponse[AssistantResponse]:
    """Ask the assistant to explain the current step.

    Always succeeds; provider failures yield the fixed fallback answer.
    """
    answer = await ask_assistant(session)
    return DataResponse(data=AssistantResponse(response=answer))


@router.delete("/assistant")
async def dismiss_seller_assistant(
    session: CurrentSession,
) -> DataResponse[SessionState]:
    """Dismiss the assistant answer. The registration is kept."""
    session.clear_ai_response()
    return _state(session)


@router.post("/submit")
@limiter.limit(settings.rate_limit_llm)
async def submit(
    request: Request,  # noqa: ARG001
    session: CurrentSession,
) -> DataResponse[SubmitResponse]:
    """Compose the registration summary and return the WhatsApp link.

    The browser opens whatsapp_url; the server does not contact WhatsApp.
    """
    result = await submit_registration(
        session,
        recipient=settings.admin_whatsapp_number,
        base_url=settings.whatsapp_base_url,
    )
    return DataResponse(data=SubmitResponse.from_result(result))
