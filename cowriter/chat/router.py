# FILE: cowriter/chat/router.py
"""
Chat endpoint.

- POST /api/chat - one message in, one reply out
"""

from fastapi import APIRouter, Depends, HTTPException

from cowriter.chat import service as chat_service
from cowriter.chat.schemas import ChatRequest, ChatResponse
from cowriter.errors import CoWriterError
from cowriter.llm.connector import LLMConnector, get_connector

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    req: ChatRequest,
    connector: LLMConnector = Depends(get_connector),
) -> ChatResponse:
    """Send chat message with optional editor context."""
    try:
        reply = await chat_service.send(connector, req.message, req.context)
    except CoWriterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return ChatResponse(text=reply)
