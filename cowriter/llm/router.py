# FILE: cowriter/llm/router.py
"""
LLM connection endpoints.

- POST /api/connect_llm     - validate + check + activate a provider
- POST /api/disconnect_llm  - drop the active provider
- GET  /api/llm_status      - connected flag and description
- GET  /api/llm_health      - re-check the active provider
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from cowriter.llm.connector import LLMConnector, get_connector
from cowriter.llm.schemas import ConnectRequest, ConnectResponse, LLMStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["LLM"])


@router.post("/connect_llm", response_model=ConnectResponse)
async def connect_llm(
    req: ConnectRequest,
    connector: LLMConnector = Depends(get_connector),
) -> ConnectResponse:
    """Connect to OpenAI or a Llama.cpp server. Always answers 200 with success flag."""
    result = await connector.connect(req.to_config())
    return ConnectResponse(success=result.success, message=result.message)


@router.post("/disconnect_llm", response_model=ConnectResponse)
async def disconnect_llm(connector: LLMConnector = Depends(get_connector)) -> ConnectResponse:
    connector.disconnect()
    return ConnectResponse(success=True, message="Disconnected")


@router.get("/llm_status", response_model=LLMStatusResponse)
async def llm_status(connector: LLMConnector = Depends(get_connector)) -> LLMStatusResponse:
    return LLMStatusResponse(**connector.status())


@router.get("/llm_health", response_model=ConnectResponse)
async def llm_health(connector: LLMConnector = Depends(get_connector)) -> ConnectResponse:
    result = await connector.health()
    return ConnectResponse(success=result.success, message=result.message)
