"""Summarization request/response models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SummarizeRequest(BaseModel):
    """Text submitted for summarization."""

    text: Optional[str] = Field(default=None, description="Raw text to summarize")


class SummaryResult(BaseModel):
    """Structured summary extracted from a completion."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., description="Narrative summary paragraphs")
    key_points: List[str] = Field(
        ..., alias="keyPoints", description="Ordered key insights"
    )


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request."""

    error: str


class TokenUsage(BaseModel):
    """Token usage tracking."""

    input_tokens: int = Field(default=0)
    output_tokens: int = Field(default=0)
    total_tokens: int = Field(default=0)
