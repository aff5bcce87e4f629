# FILE: cowriter/config.py
"""
CoWriter configuration.

All knobs come from the environment (optionally a .env file next to the
process). Values are read once per get_settings() call so tests can patch
os.environ and rebuild.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load .env before anything reads env vars
load_dotenv()


DEFAULT_OPENAI_MODEL = "gpt-4-turbo-preview"
DEFAULT_LLAMA_MODEL = "local-model"
DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000"
DEFAULT_API_URL = "http://localhost:8000"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    """Process-wide settings."""
    openai_api_key: str = ""
    model_name: str = DEFAULT_OPENAI_MODEL
    llama_model_name: str = DEFAULT_LLAMA_MODEL
    debug: bool = False
    allowed_origins: List[str] = field(default_factory=lambda: [DEFAULT_ALLOWED_ORIGINS])
    llm_timeout_seconds: float = 60.0
    temperature: float = 0.7
    api_url: str = DEFAULT_API_URL


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
        model_name=os.getenv("MODEL_NAME", DEFAULT_OPENAI_MODEL).strip() or DEFAULT_OPENAI_MODEL,
        llama_model_name=os.getenv("LLAMA_MODEL_NAME", DEFAULT_LLAMA_MODEL).strip() or DEFAULT_LLAMA_MODEL,
        debug=_env_bool("DEBUG", False),
        allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)),
        llm_timeout_seconds=_env_float("COWRITER_LLM_TIMEOUT_S", 60.0),
        temperature=_env_float("COWRITER_TEMPERATURE", 0.7),
        api_url=(os.getenv("COWRITER_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL).rstrip("/"),
    )
