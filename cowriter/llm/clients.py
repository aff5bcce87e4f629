# FILE: cowriter/llm/clients.py
"""
Provider clients for CoWriter.

Two providers are supported:
- OpenAI (AsyncOpenAI SDK)
- Llama.cpp server (OpenAI-compatible HTTP API, called with httpx)

Each client offers the same two coroutines:
- check()  -> (ok, message)   single connection check, no retries
- chat()   -> LlmCallResult   one chat completion

Clients never raise for provider failures. Errors come back as an
LlmCallResult with status ERROR so routers can map them to HTTP codes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import httpx
from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class LlmCallStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    PROVIDER_UNAVAILABLE = "provider_unavailable"


@dataclass
class LlmUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class LlmCallResult:
    status: LlmCallStatus
    provider_id: str
    model_id: str
    content: str = ""
    usage: LlmUsage = field(default_factory=LlmUsage)
    error_message: Optional[str] = None

    def is_success(self) -> bool:
        return self.status == LlmCallStatus.SUCCESS


def _normalize_messages(messages: List[dict], system_prompt: Optional[str]) -> List[dict]:
    out: List[dict] = []
    if system_prompt:
        out.append({"role": "system", "content": system_prompt})
    for m in messages:
        role = m.get("role")
        content = m.get("content", "")
        if role in ("system", "user", "assistant"):
            out.append({"role": role, "content": str(content)})
        else:
            out.append({"role": "user", "content": str(content)})
    return out


def llama_base_url(host: str, port: str) -> str:
    """Join a Llama.cpp host and port into a base URL (scheme defaults to http)."""
    h = (host or "").strip().rstrip("/")
    if "://" not in h:
        h = f"http://{h}"
    return f"{h}:{str(port).strip()}"


def _log_usage(provider_id: str, model_id: str, usage: LlmUsage) -> None:
    logger.info(
        "[%s] model=%s tokens prompt=%d completion=%d total=%d",
        provider_id,
        model_id,
        usage.prompt_tokens,
        usage.completion_tokens,
        usage.total_tokens,
    )


class LLMClient(ABC):
    """Common interface for provider clients."""

    provider_id: str = "unknown"

    def __init__(self, model_id: str, timeout_seconds: float = 60.0, temperature: float = 0.7):
        self.model_id = model_id
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature

    @abstractmethod
    async def check(self) -> Tuple[bool, str]:
        """Check the provider once. Returns (ok, message)."""

    @abstractmethod
    async def chat(
        self,
        messages: List[dict],
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> LlmCallResult:
        """Run a single chat completion."""

    def _error(self, message: str) -> LlmCallResult:
        return LlmCallResult(
            status=LlmCallStatus.ERROR,
            provider_id=self.provider_id,
            model_id=self.model_id,
            error_message=message,
        )


class OpenAIClient(LLMClient):
    provider_id = "openai"

    def __init__(self, api_key: str, model_id: str, timeout_seconds: float = 60.0, temperature: float = 0.7):
        super().__init__(model_id, timeout_seconds=timeout_seconds, temperature=temperature)
        # One attempt per call; the SDK retries twice by default
        self._client = AsyncOpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)

    async def check(self) -> Tuple[bool, str]:
        try:
            await self._client.models.list()
        except Exception as exc:
            logger.warning("[openai] connection check failed: %s", exc)
            return False, f"Failed to connect to OpenAI: {exc}"
        return True, "Connected to OpenAI"

    async def chat(
        self,
        messages: List[dict],
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> LlmCallResult:
        request_params: Dict[str, Any] = {
            "model": self.model_id,
            "messages": _normalize_messages(messages, system_prompt),
            "temperature": self.temperature,
        }
        if max_tokens is not None:
            request_params["max_tokens"] = int(max_tokens)

        try:
            resp = await self._client.chat.completions.create(**request_params)
        except Exception as exc:
            logger.exception("[openai] chat completion failed: %s", exc)
            return self._error(str(exc))

        if not getattr(resp, "choices", None):
            logger.error("[openai] completion returned no choices")
            return self._error("Empty response from OpenAI")

        usage = LlmUsage()
        if getattr(resp, "usage", None):
            usage.prompt_tokens = getattr(resp.usage, "prompt_tokens", 0) or 0
            usage.completion_tokens = getattr(resp.usage, "completion_tokens", 0) or 0
            usage.total_tokens = usage.prompt_tokens + usage.completion_tokens

        model_id = getattr(resp, "model", None) or self.model_id
        _log_usage(self.provider_id, model_id, usage)
        return LlmCallResult(
            status=LlmCallStatus.SUCCESS,
            provider_id=self.provider_id,
            model_id=model_id,
            content=resp.choices[0].message.content or "",
            usage=usage,
        )


class LlamaClient(LLMClient):
    """Llama.cpp server client (GET /health, POST /v1/chat/completions)."""

    provider_id = "llama"

    def __init__(
        self,
        host: str,
        port: str,
        model_id: str,
        timeout_seconds: float = 60.0,
        temperature: float = 0.7,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(model_id, timeout_seconds=timeout_seconds, temperature=temperature)
        self.base_url = llama_base_url(host, port)
        self._transport = transport

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout_seconds),
            transport=self._transport,
        )

    async def check(self) -> Tuple[bool, str]:
        try:
            async with self._http() as client:
                resp = await client.get("/health")
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("[llama] connection check to %s failed: %s", self.base_url, exc)
            return False, f"Failed to connect to Llama.cpp server at {self.base_url}: {exc}"

        if resp.status_code != 200:
            return False, f"Llama.cpp server at {self.base_url} returned HTTP {resp.status_code}"
        return True, f"Connected to Llama.cpp server at {self.base_url}"

    async def chat(
        self,
        messages: List[dict],
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> LlmCallResult:
        payload: Dict[str, Any] = {
            "model": self.model_id,
            "messages": _normalize_messages(messages, system_prompt),
            "temperature": self.temperature,
            "stream": False,
        }
        if max_tokens is not None:
            payload["max_tokens"] = int(max_tokens)

        try:
            async with self._http() as client:
                resp = await client.post("/v1/chat/completions", json=payload)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.exception("[llama] chat completion failed: %s", exc)
            return self._error(str(exc))
        except ValueError as exc:
            logger.error("[llama] invalid JSON from %s: %s", self.base_url, exc)
            return self._error(f"Invalid response from Llama.cpp server: {exc}")

        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            logger.error("[llama] unexpected response shape: %r", data)
            return self._error("Unexpected response from Llama.cpp server")

        raw_usage = data.get("usage") or {}
        usage = LlmUsage(
            prompt_tokens=int(raw_usage.get("prompt_tokens", 0) or 0),
            completion_tokens=int(raw_usage.get("completion_tokens", 0) or 0),
        )
        usage.total_tokens = usage.prompt_tokens + usage.completion_tokens

        model_id = data.get("model") or self.model_id
        _log_usage(self.provider_id, model_id, usage)
        return LlmCallResult(
            status=LlmCallStatus.SUCCESS,
            provider_id=self.provider_id,
            model_id=model_id,
            content=content,
            usage=usage,
        )
