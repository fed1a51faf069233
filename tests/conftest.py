"""Pytest configuration and fixtures."""

import json
import os
from typing import Any, Dict, Generator, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["API_KEYS"] = "test-api-key"
os.environ["REQUIRE_API_KEY"] = "false"

from text_summarizer.core.config import Settings, get_settings  # noqa: E402
from text_summarizer.services.llm_client import create_llm_client  # noqa: E402
from text_summarizer.services.summarizer import (  # noqa: E402
    SummarizationService,
    get_summarization_service,
)

CATS_COMPLETION = (
    "SUMMARY:\nCats are mammals.\n\nKEY POINTS:\n"
    "1. Cats sleep a lot.\n2. Cats are independent."
)


class FakeGateway:
    """In-process stand-in for the AI gateway, served through httpx.MockTransport."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.content: Optional[str] = CATS_COMPLETION
        self.error_body: Dict[str, Any] = {"error": {"message": "upstream failure"}}
        self.choices: Optional[List[Dict[str, Any]]] = None
        self.raise_error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.raise_error is not None:
            raise self.raise_error

        if self.status_code != 200:
            return httpx.Response(self.status_code, json=self.error_body)

        choices = self.choices
        if choices is None:
            choices = [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": self.content},
                    "finish_reason": "stop",
                }
            ]
        return httpx.Response(
            200,
            json={
                "id": "chatcmpl-test",
                "object": "chat.completion",
                "created": 1700000000,
                "model": "google/gemini-2.5-flash",
                "choices": choices,
                "usage": {"prompt_tokens": 120, "completion_tokens": 40, "total_tokens": 160},
            },
        )

    @property
    def last_body(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    """Settings with a gateway key and a fake gateway URL."""
    return Settings(
        _env_file=None,
        ai_gateway_api_key="test-gateway-key",
        ai_gateway_base_url="https://gateway.test/v1",
        api_keys="test-api-key",
    )


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def service(settings: Settings, fake_gateway: FakeGateway) -> SummarizationService:
    """Summarization service wired to the fake gateway."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_gateway.handler))
    client = create_llm_client(settings, http_client=http_client)
    return SummarizationService(settings=settings, client=client)


@pytest.fixture
def app_client(
    settings: Settings, service: SummarizationService
) -> Generator[TestClient, None, None]:
    """Create test client with the fake gateway behind the summarize routes."""
    get_settings.cache_clear()

    from text_summarizer.main import create_app

    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_summarization_service] = lambda: service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
