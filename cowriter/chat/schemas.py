"""Schemas for the chat relay."""

from typing import Optional

from pydantic import BaseModel


class ChatRequest(BaseModel):
    message: str
    context: Optional[str] = None


class ChatResponse(BaseModel):
    text: str
