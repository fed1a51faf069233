"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from text_summarizer.api.routes import admin, summarize
from text_summarizer.core.config import get_settings
from text_summarizer.core.exceptions import (
    SummarizerError,
    error_response,
    summarizer_exception_handler,
    validation_exception_handler,
)
from text_summarizer.services.summarizer import SummarizationService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    app.state.summarizer = SummarizationService(settings)
    if not app.state.summarizer.configured:
        logger.warning("AI_GATEWAY_API_KEY is not set, summarization requests will fail")

    yield

    logger.info("Shutting down...")
    await app.state.summarizer.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Summarizes pasted or uploaded text into a summary and key points",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Register exception handlers
    app.add_exception_handler(SummarizerError, summarizer_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register routers
    api_prefix = "/api/v1"
    app.include_router(admin.router, prefix=api_prefix)
    app.include_router(summarize.router, prefix=api_prefix)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "service": settings.app_name,
            "version": VERSION,
            "docs": "/docs",
        }

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled exception: {exc}")
        return error_response(str(exc) or "Unknown error occurred", 500)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "text_summarizer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
        loop="asyncio",
    )
