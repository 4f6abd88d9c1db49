"""KTP photo capture.

Turns an uploaded KTP image into a data: URL preview and stores photo and
preview on the session together.

Conversion is a single-shot async operation with no progress reporting and
no cancellation. A failed conversion leaves the record untouched.
"""

import asyncio
import base64

import structlog

from app.schemas.registration import KtpPhoto
from app.services.registration_session import RegistrationSession

logger = structlog.get_logger()


def to_data_url(content: bytes, content_type: str) -> str:
    """Encode binary content as a base64 data: URL.

    Args:
        content: Raw image bytes.
        content_type: MIME type to declare (e.g., "image/jpeg").

    Returns:
        String like "data:image/jpeg;base64,/9j/4AAQ...".
    """
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


async def capture_ktp_photo(session: RegistrationSession, photo: KtpPhoto) -> bool:
    """Convert a KTP photo to its preview and store both on the session.

    Args:
        session: Session that receives the photo.
        photo: Uploaded image.

    Returns:
        True if the photo was stored, False if conversion failed.
    """
    try:
        preview = await asyncio.to_thread(
            to_data_url, photo.content, photo.content_type
        )
    except (ValueError, TypeError, MemoryError) as e:
        logger.warning(
            "ktp_photo_conversion_failed",
            filename=photo.filename,
            error_type=type(e).__name__,
        )
        return False

    session.set_ktp_photo(photo, preview)
    return True
