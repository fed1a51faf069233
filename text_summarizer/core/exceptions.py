"""Custom exceptions and exception handlers."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from text_summarizer.core.config import get_settings

logger = logging.getLogger(__name__)


class SummarizerError(Exception):
    """Base exception for the summarizer service.

    The message is returned to the caller verbatim, so it must stay short and
    free of upstream payloads.
    """

    retryable: bool = False

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class EmptyTextError(SummarizerError):
    """No text to summarize."""

    def __init__(self):
        super().__init__("No text provided", status_code=status.HTTP_400_BAD_REQUEST)


class AuthenticationError(SummarizerError):
    """Missing or unknown apikey header."""

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED)


class ServiceNotConfiguredError(SummarizerError):
    """Upstream credential missing."""

    def __init__(self):
        super().__init__(
            "AI service not configured",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class RateLimitedError(SummarizerError):
    """Upstream rate limit hit. The caller may retry after a delay."""

    retryable = True

    def __init__(self):
        super().__init__(
            "Rate limit exceeded. Please try again in a moment.",
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        )


class QuotaExceededError(SummarizerError):
    """Upstream quota exhausted."""

    def __init__(self):
        super().__init__(
            "AI service quota exceeded. Please contact support.",
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
        )


class UpstreamError(SummarizerError):
    """Any other non-success status from the AI service."""

    def __init__(self, upstream_status: int):
        self.upstream_status = upstream_status
        super().__init__(
            "Failed to process request",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class SummarizationFailedError(SummarizerError):
    """Unexpected failure during the request/response cycle."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "Unknown error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class UnsupportedFileTypeError(SummarizerError):
    """Uploaded file is neither plain text nor PDF."""

    def __init__(self, content_type: str | None = None):
        self.content_type = content_type
        super().__init__(
            "Unsupported file type. Please upload a PDF or TXT file",
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        )


class FileTooLargeError(SummarizerError):
    """Uploaded file exceeds the configured size limit."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(
            "File exceeds the maximum upload size",
            status_code=413,
        )


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the `{"error": ...}` payload with CORS headers attached."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=get_settings().cors_headers,
    )


async def summarizer_exception_handler(
    request: Request, exc: SummarizerError
) -> JSONResponse:
    """Handle SummarizerError exceptions."""
    return error_response(exc.message, exc.status_code)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unreadable request bodies as a processing failure.

    A missing ``text`` field never gets here; it is treated as empty text.
    """
    errors = exc.errors()
    locations = [".".join(str(p) for p in e.get("loc", ())) for e in errors]
    logger.warning(f"Rejected request body on {request.url.path}: {locations}")
    err = SummarizationFailedError(errors[0].get("msg") if errors else None)
    return error_response(err.message, err.status_code)
