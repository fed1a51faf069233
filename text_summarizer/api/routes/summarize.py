"""Summarization API routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Response, UploadFile

from text_summarizer.core.config import Settings, get_settings
from text_summarizer.core.security import ClientKeyDep
from text_summarizer.models.summary import ErrorResponse, SummarizeRequest, SummaryResult
from text_summarizer.services.input_reader import read_upload
from text_summarizer.services.summarizer import (
    SummarizationService,
    get_summarization_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summarize-text", tags=["summarize"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "No text provided"},
    401: {"model": ErrorResponse, "description": "Missing or invalid apikey header"},
    402: {"model": ErrorResponse, "description": "AI service quota exceeded"},
    429: {"model": ErrorResponse, "description": "Rate limited, retry later"},
    500: {"model": ErrorResponse, "description": "Configuration or processing failure"},
}


@router.options("")
@router.options("/file")
async def preflight(settings: Annotated[Settings, Depends(get_settings)]) -> Response:
    """Answer CORS pre-flight requests with an empty body."""
    return Response(status_code=200, headers=settings.cors_headers)


@router.post("", response_model=SummaryResult, responses=ERROR_RESPONSES)
async def summarize_text(
    request: SummarizeRequest,
    response: Response,
    _api_key: ClientKeyDep,
    service: Annotated[SummarizationService, Depends(get_summarization_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SummaryResult:
    """Summarize pasted text into a summary and key points."""
    result = await service.summarize(request.text)
    response.headers.update(settings.cors_headers)
    return result


@router.post(
    "/file",
    response_model=SummaryResult,
    responses={
        **ERROR_RESPONSES,
        413: {"model": ErrorResponse, "description": "File too large"},
        415: {"model": ErrorResponse, "description": "Unsupported file type"},
    },
)
async def summarize_file(
    file: Annotated[UploadFile, File(description="TXT or PDF file to summarize")],
    response: Response,
    _api_key: ClientKeyDep,
    service: Annotated[SummarizationService, Depends(get_summarization_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SummaryResult:
    """Summarize the text content of an uploaded TXT or PDF file."""
    data = await file.read()
    text = read_upload(file.filename, file.content_type, data, settings.max_upload_bytes)

    logger.info(
        f"Summarizing file '{file.filename}' ({file.content_type}), "
        f"{len(text)} chars"
    )

    result = await service.summarize(text)
    response.headers.update(settings.cors_headers)
    return result
