# FILE: cowriter/llm/schemas.py
"""
Schemas for the LLM connection surface.

LLMConfig is the single active provider configuration. Its shape depends on
the provider type: OpenAI carries an api_key, Llama.cpp carries host + port.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LLMType(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    LLAMA = "llama"


class LLMConfig(BaseModel):
    """Active provider configuration. type=None means not connected."""
    type: Optional[LLMType] = None
    api_key: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None

    def describe(self) -> str:
        if self.type == LLMType.OPENAI:
            return "OpenAI"
        if self.type == LLMType.LLAMA:
            return f"Llama.cpp ({self.host}:{self.port})"
        return "Not connected"


# =============================================================================
# HTTP bodies
# =============================================================================

class ConnectRequest(BaseModel):
    """Body of POST /api/connect_llm."""
    type: LLMType
    api_key: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = Field(None, description="Llama.cpp server port")

    @field_validator("port", mode="before")
    @classmethod
    def _port_to_str(cls, v):
        # The UI sends the port as a string; accept integers too
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_config(self) -> LLMConfig:
        if self.type == LLMType.OPENAI:
            return LLMConfig(type=self.type, api_key=self.api_key)
        return LLMConfig(type=self.type, host=self.host, port=self.port)


class ConnectResponse(BaseModel):
    success: bool
    message: Optional[str] = None


class LLMStatusResponse(BaseModel):
    connected: bool
    type: Optional[LLMType] = None
    description: str
