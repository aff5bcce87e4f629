# FILE: tests/conftest.py
"""
Pytest configuration for CoWriter test suite.

Configures:
- pytest-asyncio (asyncio_mode = "auto" in pyproject.toml)
- a fresh LLMConnector singleton per test
- FakeLLMClient for tests that must not touch a real provider
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pytest

from cowriter.config import Settings
from cowriter.llm.clients import LLMClient, LlmCallResult, LlmCallStatus
from cowriter.llm.connector import LLMConnector


class FakeLLMClient(LLMClient):
    """Provider double: records calls, answers with canned values."""

    provider_id = "fake"

    def __init__(self, check_ok=True, check_message="ok", reply="reply", error=None):
        super().__init__("fake-model")
        self.check_ok = check_ok
        self.check_message = check_message
        self.reply = reply
        self.error = error
        self.check_calls = 0
        self.chat_calls = []

    async def check(self):
        self.check_calls += 1
        return self.check_ok, self.check_message

    async def chat(self, messages, system_prompt=None, max_tokens=None):
        self.chat_calls.append({"messages": messages, "system_prompt": system_prompt})
        if self.error:
            return LlmCallResult(
                status=LlmCallStatus.ERROR,
                provider_id=self.provider_id,
                model_id=self.model_id,
                error_message=self.error,
            )
        return LlmCallResult(
            status=LlmCallStatus.SUCCESS,
            provider_id=self.provider_id,
            model_id=self.model_id,
            content=self.reply,
        )


@pytest.fixture(autouse=True)
def reset_connector():
    """Each test starts with no process-wide connector."""
    LLMConnector.reset_instance()
    yield
    LLMConnector.reset_instance()


@pytest.fixture
def settings():
    return Settings(openai_api_key="", model_name="gpt-test", llama_model_name="llama-test")


@pytest.fixture
def fake_client():
    return FakeLLMClient()


@pytest.fixture
def connector(settings, fake_client):
    """Connector whose factory always hands out fake_client."""
    factory_calls = []

    def factory(config, s):
        factory_calls.append(config)
        return fake_client

    conn = LLMConnector(settings=settings, client_factory=factory)
    conn.factory_calls = factory_calls
    return conn
