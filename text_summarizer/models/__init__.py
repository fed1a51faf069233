"""Pydantic models package."""

from text_summarizer.models.summary import (
    ErrorResponse,
    SummarizeRequest,
    SummaryResult,
    TokenUsage,
)

__all__ = [
    "SummarizeRequest",
    "SummaryResult",
    "ErrorResponse",
    "TokenUsage",
]
