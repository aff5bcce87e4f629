# FILE: cowriter/actions/service.py
"""
Action Executor.

execute() turns (action, text, profile) into a prompt, sends it to the
connected LLM and returns the transformed text. Nothing is stored.
"""

from __future__ import annotations

import logging

from cowriter.actions.prompts import build_action_messages, build_system_prompt
from cowriter.actions.schemas import Tone, WritingStyle
from cowriter.errors import InvalidInputError, LLMCallError, LLMNotConnectedError
from cowriter.llm.clients import LlmCallStatus
from cowriter.llm.connector import LLMConnector

logger = logging.getLogger(__name__)


async def execute(
    connector: LLMConnector,
    action_name: str,
    action_description: str,
    text: str,
    about_me: str = "",
    style: WritingStyle = WritingStyle.PROFESSIONAL,
    tone: Tone = Tone.FORMAL,
) -> str:
    """
    Run one action over text.

    Raises:
        InvalidInputError: text is empty or whitespace
        LLMNotConnectedError: no provider is active
        LLMCallError: the provider call failed
    """
    if not (text or "").strip():
        raise InvalidInputError("Text is required")
    if not connector.is_connected:
        raise LLMNotConnectedError()

    logger.info("[actions] Running '%s' on %d chars", action_name, len(text))

    result = await connector.complete(
        build_action_messages(action_name, action_description, text),
        system_prompt=build_system_prompt(about_me, style, tone),
    )

    if result.status == LlmCallStatus.PROVIDER_UNAVAILABLE:
        raise LLMNotConnectedError()
    if not result.is_success():
        logger.error("[actions] '%s' failed: %s", action_name, result.error_message)
        raise LLMCallError(f"Failed to process action: {result.error_message or 'unknown error'}")

    return result.content.strip()
