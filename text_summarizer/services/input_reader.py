"""Turns uploaded files into text for summarization."""

import logging
from pathlib import PurePath
from typing import Optional

from text_summarizer.core.exceptions import FileTooLargeError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

SUPPORTED_CONTENT_TYPES = {"text/plain", "application/pdf"}
SUPPORTED_EXTENSIONS = {".txt", ".pdf"}
FALLBACK_ENCODING = "latin-1"


def is_supported_file(filename: Optional[str], content_type: Optional[str]) -> bool:
    """Accept plain text and PDF uploads by content type or extension."""
    if content_type:
        media_type = content_type.split(";")[0].strip().lower()
        if media_type in SUPPORTED_CONTENT_TYPES:
            return True
    if filename:
        return PurePath(filename).suffix.lower() in SUPPORTED_EXTENSIONS
    return False


def decode_bytes(data: bytes) -> str:
    """Decode file bytes as UTF-8, falling back to latin-1.

    PDF files go through the same path: their raw bytes are read as text, no
    PDF structure is parsed.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.info(f"File is not UTF-8, decoding as {FALLBACK_ENCODING}")
        return data.decode(FALLBACK_ENCODING)


def read_upload(
    filename: Optional[str],
    content_type: Optional[str],
    data: bytes,
    max_bytes: int,
) -> str:
    """Validate an uploaded file and return its text content.

    Raises:
        UnsupportedFileTypeError: Neither TXT nor PDF.
        FileTooLargeError: Larger than ``max_bytes``.
    """
    if not is_supported_file(filename, content_type):
        logger.warning(f"Rejected upload '{filename}' ({content_type})")
        raise UnsupportedFileTypeError(content_type)

    if len(data) > max_bytes:
        logger.warning(f"Rejected upload '{filename}': {len(data)} bytes > {max_bytes}")
        raise FileTooLargeError(max_bytes)

    return decode_bytes(data)
