"""Media-type resolution for uploaded images.

Browsers normally send a proper ``image/*`` content type with the upload.
When it is missing or generic we open the bytes with Pillow and map the
detected format back to a MIME type.
"""
from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

GENERIC_MIME_TYPE = "application/octet-stream"


def resolve_mime_type(file_bytes: bytes, declared: str | None) -> str:
    """Return *declared* if it is specific, else the type sniffed from *file_bytes*.

    Falls back to the declared value (or ``application/octet-stream``) when
    Pillow cannot identify the data. The bytes are never rejected here.
    """

    if declared and declared.lower() != GENERIC_MIME_TYPE:
        return declared

    try:
        with Image.open(io.BytesIO(file_bytes)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError) as exc:
        logger.debug("Could not identify image format: %s", exc)
        return declared or GENERIC_MIME_TYPE

    mime = Image.MIME.get(fmt or "")
    if mime is None:
        return declared or GENERIC_MIME_TYPE
    logger.debug("Sniffed media type %s for upload declared as %r", mime, declared)
    return mime
