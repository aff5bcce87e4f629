# FILE: cowriter/session/client.py
"""
Backend HTTP client for the session layer.

Wraps the three CoWriter endpoints:
- POST /api/connect_llm
- POST /api/submit_action
- POST /api/chat

Non-2xx answers and transport errors are raised as BackendError with the
backend's "detail" when there is one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from cowriter.config import get_settings
from cowriter.llm.schemas import LLMConfig, LLMType
from cowriter.session.models import Profile

logger = logging.getLogger(__name__)


class BackendError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class BackendClient:
    """Async client for the CoWriter backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or get_settings().api_url).rstrip("/")
        # None means no timeout, matching the browser fetch() the UI used
        self.timeout = timeout
        self._transport = transport

    async def _post(self, endpoint: str, json_data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            ) as client:
                response = await client.post(endpoint, json=json_data)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Backend connection error on %s: %s", endpoint, e)
            raise BackendError(f"Could not reach backend: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_error:
            detail = data.get("detail") if isinstance(data, dict) else None
            if not isinstance(detail, str):
                detail = None
            raise BackendError(
                detail or f"Backend returned HTTP {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )
        return data if isinstance(data, dict) else {}

    async def connect_llm(self, config: LLMConfig) -> Dict[str, Any]:
        body: Dict[str, Any] = {"type": config.type.value if config.type else None}
        if config.type == LLMType.OPENAI:
            body["api_key"] = config.api_key
        else:
            body["host"] = config.host
            body["port"] = config.port
        return await self._post("/api/connect_llm", body)

    async def submit_action(self, action_name: str, action_description: str, text: str, profile: Profile) -> str:
        data = await self._post(
            "/api/submit_action",
            {
                "action": action_name.lower(),
                "action_description": action_description,
                "text": text,
                "about_me": profile.about_me,
                "preferred_style": profile.preferred_style.value,
                "tone": profile.tone.value,
            },
        )
        return data.get("text", "")

    async def chat(self, message: str, context: Optional[str] = None) -> str:
        body: Dict[str, Any] = {"message": message}
        if context:
            body["context"] = context
        data = await self._post("/api/chat", body)
        return data.get("text", "")
