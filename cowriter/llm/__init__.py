"""
LLM connection layer.

One active provider at a time (OpenAI or Llama.cpp), held by LLMConnector.
"""

from cowriter.llm.clients import (
    LlamaClient,
    LLMClient,
    LlmCallResult,
    LlmCallStatus,
    OpenAIClient,
)
from cowriter.llm.connector import ConnectResult, LLMConnector, get_connector, validate_config
from cowriter.llm.schemas import ConnectRequest, ConnectResponse, LLMConfig, LLMType

__all__ = [
    # Clients
    "LLMClient",
    "OpenAIClient",
    "LlamaClient",
    "LlmCallResult",
    "LlmCallStatus",
    # Connector
    "LLMConnector",
    "ConnectResult",
    "get_connector",
    "validate_config",
    # Schemas
    "LLMConfig",
    "LLMType",
    "ConnectRequest",
    "ConnectResponse",
]
