"""Summarization service - sends text to the AI gateway and structures the reply."""

import logging
from typing import Optional

from fastapi import Request

from text_summarizer.core.config import Settings, get_settings
from text_summarizer.core.exceptions import (
    EmptyTextError,
    QuotaExceededError,
    RateLimitedError,
    ServiceNotConfiguredError,
    SummarizationFailedError,
    SummarizerError,
    UpstreamError,
)
from text_summarizer.models.summary import SummaryResult
from text_summarizer.services.llm_client import (
    BaseLLMClient,
    LLMClientError,
    LLMStatusError,
    create_llm_client,
)
from text_summarizer.services.response_parser import parse_completion

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert content analyzer. Create clear, human-readable summaries.

CRITICAL INSTRUCTIONS:
- Write in natural, flowing sentences
- Make the summary 2-3 well-written paragraphs
- Extract 3-5 key insights as complete, standalone sentences
- Use professional but conversational language
- Focus on the most important and interesting information
- Do NOT use JSON formatting or technical jargon
- Do NOT include quotes, brackets, or code-like syntax

Response format:
SUMMARY:
[Your 2-3 paragraph summary here]

KEY POINTS:
1. [First key insight as a complete sentence]
2. [Second key insight as a complete sentence]
3. [Third key insight as a complete sentence]"""

USER_PROMPT_PREFIX = "Please analyze this text and provide a clear summary with key insights:\n\n"


def map_upstream_status(status_code: int) -> SummarizerError:
    """Translate a non-success AI service status into a service error."""
    if status_code == 429:
        return RateLimitedError()
    if status_code == 402:
        return QuotaExceededError()
    return UpstreamError(status_code)


class SummarizationService:
    """Validates input, calls the AI gateway and parses the completion."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[BaseLLMClient] = None,
    ):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self.settings.ai_gateway_api_key)

    def _get_client(self) -> BaseLLMClient:
        if self._client is None:
            self._client = create_llm_client(self.settings)
        return self._client

    def build_user_message(self, text: str) -> str:
        """Prefix the instruction and cut the text to the configured limit."""
        return f"{USER_PROMPT_PREFIX}{text[: self.settings.max_input_chars]}"

    async def summarize(self, text: Optional[str]) -> SummaryResult:
        """Summarize text into a SummaryResult.

        Args:
            text: Raw pasted or uploaded text.

        Returns:
            Parsed summary with key points.

        Raises:
            EmptyTextError: Text is missing or whitespace only.
            ServiceNotConfiguredError: No AI gateway key is configured.
            RateLimitedError: AI service answered 429.
            QuotaExceededError: AI service answered 402.
            UpstreamError: AI service answered any other error status.
            SummarizationFailedError: Transport or unexpected failure.
        """
        if not text or not text.strip():
            raise EmptyTextError()

        if not self.configured:
            logger.error("AI_GATEWAY_API_KEY is not configured")
            raise ServiceNotConfiguredError()

        logger.info(
            f"Calling AI service to summarize text ({len(text)} chars, "
            f"sending {min(len(text), self.settings.max_input_chars)})"
        )

        try:
            completion, usage = await self._get_client().generate(
                SYSTEM_PROMPT, self.build_user_message(text)
            )
        except LLMStatusError as e:
            logger.error(f"AI service error: {e.status_code} {e.body}")
            raise map_upstream_status(e.status_code) from e
        except LLMClientError as e:
            logger.error(f"AI service call failed: {e}")
            raise SummarizationFailedError(str(e)) from e
        except Exception as e:
            logger.exception(f"Error while summarizing text: {e}")
            raise SummarizationFailedError(str(e)) from e

        logger.info(f"AI service response received, tokens: {usage.total_tokens}")
        logger.debug(f"Raw AI response: {completion}")

        result = parse_completion(completion)
        logger.info(
            f"Parsed result: summary {len(result.summary)} chars, "
            f"{len(result.key_points)} key points"
        )
        return result

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()


def get_summarization_service(request: Request) -> SummarizationService:
    """Get the application's summarization service."""
    service = getattr(request.app.state, "summarizer", None)
    if service is None:
        service = SummarizationService()
        request.app.state.summarizer = service
    return service
