# FILE: cowriter/chat/service.py
"""
Chat Relay - forwards one user message (plus optional editor context) to
the connected LLM. No history is kept server side.
"""

from __future__ import annotations

import logging
from typing import Optional

from cowriter.errors import InvalidInputError, LLMCallError, LLMNotConnectedError
from cowriter.llm.clients import LlmCallStatus
from cowriter.llm.connector import LLMConnector

logger = logging.getLogger(__name__)

CHAT_SYSTEM_PROMPT = (
    "You are Co Writer, a friendly writing assistant. "
    "Help the user with their writing and answer concisely."
)


def build_chat_system_prompt(context: Optional[str] = None) -> str:
    ctx = (context or "").strip()
    if not ctx:
        return CHAT_SYSTEM_PROMPT
    return f"{CHAT_SYSTEM_PROMPT}\n\n{ctx}"


async def send(connector: LLMConnector, message: str, context: Optional[str] = None) -> str:
    """
    Relay a chat message and return the reply text.

    Raises:
        InvalidInputError: message is blank
        LLMNotConnectedError: no provider is active
        LLMCallError: the provider call failed
    """
    if not (message or "").strip():
        raise InvalidInputError("Message is required")
    if not connector.is_connected:
        raise LLMNotConnectedError()

    result = await connector.complete(
        [{"role": "user", "content": message}],
        system_prompt=build_chat_system_prompt(context),
    )

    if result.status == LlmCallStatus.PROVIDER_UNAVAILABLE:
        raise LLMNotConnectedError()
    if not result.is_success():
        logger.error("[chat] LLM call failed: %s", result.error_message)
        raise LLMCallError(f"Failed to get a reply: {result.error_message or 'unknown error'}")

    return result.content
