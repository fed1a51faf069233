"""LLM client for the OpenAI-compatible AI gateway."""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import httpx
import openai

from text_summarizer.core.config import Settings, get_settings
from text_summarizer.models.summary import TokenUsage

logger = logging.getLogger(__name__)


class LLMClientError(Exception):
    """Error from LLM client."""

    pass


class LLMStatusError(LLMClientError):
    """The AI service answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"AI service returned HTTP {status_code}")


class BaseLLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def generate(self, prompt: str, document: str) -> Tuple[str, TokenUsage]:
        """Generate response from LLM.

        Args:
            prompt: System/instruction prompt.
            document: User message content.

        Returns:
            Tuple of (response_text, token_usage).
        """
        pass

    async def close(self) -> None:
        """Release network resources held by the client."""
        return None


class GatewayClient(BaseLLMClient):
    """Chat-completions client for an OpenAI-compatible gateway.

    Retries are disabled so that rate-limit and quota responses surface to the
    caller on the first attempt.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

    async def generate(self, prompt: str, document: str) -> Tuple[str, TokenUsage]:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": prompt},
                    {"role": "user", "content": document},
                ],
            )
        except openai.APIStatusError as e:
            raise LLMStatusError(e.status_code, e.response.text) from e
        except openai.APIError as e:
            raise LLMClientError(f"AI service request failed: {e}") from e

        if not response.choices:
            raise LLMClientError("AI service returned no choices")

        text = response.choices[0].message.content or ""
        usage = TokenUsage(
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
            total_tokens=response.usage.total_tokens if response.usage else 0,
        )
        return text, usage

    async def close(self) -> None:
        await self.client.close()


def create_llm_client(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> GatewayClient:
    """Create a gateway client from settings.

    Raises:
        LLMClientError: If the gateway API key is not configured.
    """
    settings = settings or get_settings()
    if not settings.ai_gateway_api_key:
        raise LLMClientError("AI_GATEWAY_API_KEY not configured")

    logger.info(f"Created LLM client: {settings.ai_gateway_base_url} / {settings.summary_model}")
    return GatewayClient(
        api_key=settings.ai_gateway_api_key,
        model=settings.summary_model,
        base_url=settings.ai_gateway_base_url,
        timeout=settings.request_timeout_seconds,
        http_client=http_client,
    )
