"""Admin API routes for service status."""

import logging
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from text_summarizer.core.config import Settings, get_settings
from text_summarizer.core.security import ClientKeyDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    ai_service_configured: bool
    model: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check service health and AI gateway configuration."""
    return HealthResponse(
        status="healthy",
        ai_service_configured=bool(settings.ai_gateway_api_key),
        model=settings.summary_model,
    )


@router.get("/config")
async def get_config(
    _api_key: ClientKeyDep,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Dict[str, Any]:
    """Get current configuration (non-sensitive values only)."""
    return {
        "app_name": settings.app_name,
        "debug": settings.debug,
        "require_api_key": settings.require_api_key,
        "ai_gateway_base_url": settings.ai_gateway_base_url,
        "summary_model": settings.summary_model,
        "request_timeout_seconds": settings.request_timeout_seconds,
        "max_input_chars": settings.max_input_chars,
        "max_upload_bytes": settings.max_upload_bytes,
        "ai_gateway_configured": bool(settings.ai_gateway_api_key),
    }
