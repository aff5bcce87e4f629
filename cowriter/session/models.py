# FILE: cowriter/session/models.py
"""
Session-local data model: chat messages, action buttons, profile.

Dataclass-based, nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from cowriter.actions.schemas import Tone, WritingStyle

GREETING = "Hello! I'm Co Writer. How can I help you today?"
CHAT_FALLBACK = "I'm sorry, I encountered an error. Please try again."

NEW_ACTION_NAME = "New Action"
NEW_ACTION_DESCRIPTION = "Describe what this action should do..."
NEW_ACTION_EMOJI = "\U0001f539"  # small blue diamond


@dataclass
class Message:
    text: str
    is_user: bool
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ActionButton:
    id: str
    name: str
    action: str
    emoji: str = ""


def default_actions() -> List[ActionButton]:
    """The three actions every session starts with."""
    return [
        ActionButton("1", "Expand", "Expand the text while maintaining the context", "✨"),
        ActionButton("2", "Shorten", "Make the text more concise", "✂️"),
        ActionButton("3", "Critique", "Provide feedback on the writing", "\U0001f3af"),
    ]


@dataclass
class Profile:
    about_me: str = ""
    preferred_style: WritingStyle = WritingStyle.PROFESSIONAL
    tone: Tone = Tone.FORMAL
