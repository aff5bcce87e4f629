# FILE: cowriter/llm/connector.py
"""
LLM Connector - holds the single active provider configuration.

Operations:
- connect(config)   validate, check once, activate (or revert to unconnected)
- disconnect()      drop the active provider
- status()          connected flag + human description
- health()          re-check the active provider
- complete(...)     chat completion through the active provider

The connector is a process-wide singleton. The active client is swapped
under a lock so a request sees either the old or the new provider.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from cowriter.config import Settings, get_settings
from cowriter.llm.clients import (
    LlamaClient,
    LLMClient,
    LlmCallResult,
    LlmCallStatus,
    OpenAIClient,
)
from cowriter.llm.schemas import LLMConfig, LLMType

logger = logging.getLogger(__name__)


@dataclass
class ConnectResult:
    success: bool
    message: Optional[str] = None


def validate_config(config: LLMConfig, fallback_api_key: str = "") -> Optional[str]:
    """
    Check required fields for the provider type.

    Returns an error message, or None when the config is usable.
    """
    if config.type is None:
        return "LLM type is required"

    if config.type == LLMType.OPENAI:
        if not (config.api_key or "").strip() and not fallback_api_key:
            return "API key is required"
        return None

    host = (config.host or "").strip()
    port = (config.port or "").strip()
    if not host or not port:
        return "Host and port are required"
    try:
        port_num = int(port)
    except ValueError:
        return "Port must be an integer between 1 and 65535"
    if not 1 <= port_num <= 65535:
        return "Port must be an integer between 1 and 65535"
    return None


ClientFactory = Callable[[LLMConfig, Settings], LLMClient]


def default_client_factory(config: LLMConfig, settings: Settings) -> LLMClient:
    if config.type == LLMType.OPENAI:
        return OpenAIClient(
            api_key=(config.api_key or "").strip() or settings.openai_api_key,
            model_id=settings.model_name,
            timeout_seconds=settings.llm_timeout_seconds,
            temperature=settings.temperature,
        )
    return LlamaClient(
        host=(config.host or "").strip(),
        port=(config.port or "").strip(),
        model_id=settings.llama_model_name,
        timeout_seconds=settings.llm_timeout_seconds,
        temperature=settings.temperature,
    )


class LLMConnector:
    """Singleton holder of the active LLM provider."""

    _instance: Optional["LLMConnector"] = None
    _lock = threading.Lock()

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self._settings = settings or get_settings()
        self._client_factory = client_factory or default_client_factory
        self._config = LLMConfig()
        self._client: Optional[LLMClient] = None
        self._state_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "LLMConnector":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def config(self) -> LLMConfig:
        """Active config without the api key."""
        with self._state_lock:
            return self._config.model_copy(update={"api_key": None})

    def _activate(self, config: LLMConfig, client: Optional[LLMClient]) -> None:
        with self._state_lock:
            self._config = config
            self._client = client

    def disconnect(self) -> None:
        if self.is_connected:
            logger.info("[connector] Disconnected from %s", self._config.describe())
        self._activate(LLMConfig(), None)

    def status(self) -> dict:
        cfg = self.config
        return {
            "connected": self.is_connected,
            "type": cfg.type,
            "description": cfg.describe(),
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def connect(self, config: LLMConfig) -> ConnectResult:
        error = validate_config(config, fallback_api_key=self._settings.openai_api_key)
        if error:
            logger.info("[connector] Rejected %s config: %s", config.type, error)
            return ConnectResult(success=False, message=error)

        client = self._client_factory(config, self._settings)
        logger.info("[connector] Checking connection to %s", config.describe())
        ok, message = await client.check()

        if not ok:
            self._activate(LLMConfig(), None)
            logger.warning("[connector] Connection failed: %s", message)
            return ConnectResult(success=False, message=message)

        self._activate(config, client)
        logger.info("[connector] Connected to %s (model=%s)", config.describe(), client.model_id)
        return ConnectResult(success=True, message=message)

    async def health(self) -> ConnectResult:
        client = self._client
        if client is None:
            return ConnectResult(success=False, message="No LLM connected")
        ok, message = await client.check()
        return ConnectResult(success=ok, message=message)

    async def complete(
        self,
        messages: List[dict],
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> LlmCallResult:
        client = self._client
        if client is None:
            return LlmCallResult(
                status=LlmCallStatus.PROVIDER_UNAVAILABLE,
                provider_id="none",
                model_id="",
                error_message="No LLM connected",
            )
        return await client.chat(messages, system_prompt=system_prompt, max_tokens=max_tokens)


def get_connector() -> LLMConnector:
    """FastAPI dependency returning the process-wide connector."""
    return LLMConnector.get_instance()
