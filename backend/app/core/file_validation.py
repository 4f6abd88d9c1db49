"""File validation utilities for KTP photo uploads.

Validates image content by magic bytes (not the client-supplied content type)
and enforces a size limit while reading the upload.
"""

from typing import TYPE_CHECKING

import magic
import structlog

if TYPE_CHECKING:
    from fastapi import UploadFile

from app.core.errors import ValidationError

logger = structlog.get_logger()

# Chunk size for reading uploads (64 KB)
CHUNK_SIZE_BYTES = 64 * 1024

ALLOWED_IMAGE_MIMES: frozenset[str] = frozenset(
    {
        "image/jpeg",
        "image/png",
        "image/webp",
        "image/gif",
        "image/heic",
    }
)


async def read_file_with_size_limit(
    file: "UploadFile",
    max_size: int,
) -> bytes:
    """Read upload content with a size limit.

    Args:
        file: UploadFile from FastAPI.
        max_size: Maximum allowed file size in bytes.

    Returns:
        File content as bytes.

    Raises:
        ValidationError: If the file exceeds the size limit or is empty.
    """
    content = b""
    total_size = 0

    while True:
        chunk = await file.read(CHUNK_SIZE_BYTES)
        if not chunk:
            break
        total_size += len(chunk)
        if total_size > max_size:
            raise ValidationError(
                message=f"File too large. Maximum size: {max_size // (1024 * 1024)}MB",
                details=[{"field": "file", "error": "FILE_TOO_LARGE"}],
            )
        content += chunk

    if not content:
        raise ValidationError(
            message="Uploaded file is empty.",
            details=[{"field": "file", "error": "EMPTY_FILE"}],
        )

    return content


def detect_image_type(content: bytes, filename: str) -> str:
    """Detect the image MIME type of uploaded content.

    Args:
        content: File binary content.
        filename: Original filename (for logging only).

    Returns:
        Detected MIME type (e.g., "image/jpeg").

    Raises:
        ValidationError: If the content is not an allowed image type.
    """
    detected_mime = magic.from_buffer(content, mime=True)

    if detected_mime not in ALLOWED_IMAGE_MIMES:
        # Log detected MIME for server-side debugging; do NOT expose to client
        logger.warning(
            "ktp_photo_rejected",
            detected_mime=detected_mime,
            filename=filename,
        )
        raise ValidationError(
            message="Invalid file type. Please upload a photo of your KTP.",
            details=[{"field": "file", "error": "INVALID_FILE_CONTENT"}],
        )

    return detected_mime
