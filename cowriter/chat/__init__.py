"""Chat relay."""

from cowriter.chat.schemas import ChatRequest, ChatResponse
from cowriter.chat.service import send

__all__ = ["send", "ChatRequest", "ChatResponse"]
