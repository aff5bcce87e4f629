"""Schemas for text-transformation actions."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class WritingStyle(str, Enum):
    PROFESSIONAL = "Professional"
    CASUAL = "Casual"
    ACADEMIC = "Academic"
    CREATIVE = "Creative"


class Tone(str, Enum):
    FORMAL = "Formal"
    INFORMAL = "Informal"
    FRIENDLY = "Friendly"
    TECHNICAL = "Technical"


class ActionRequest(BaseModel):
    """Body of POST /api/submit_action."""
    action: str = Field(..., description="Action name, lowercased by the UI")
    action_description: str = Field("", description="Free-text instruction for the action")
    text: str = Field(..., description="Current editor content")
    about_me: str = ""
    preferred_style: WritingStyle = WritingStyle.PROFESSIONAL
    tone: Tone = Tone.FORMAL


class ActionResponse(BaseModel):
    text: str
