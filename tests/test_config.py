# FILE: tests/test_config.py
"""
Tests for cowriter/config.py
Environment-driven settings.
"""

import pytest
from dotenv import dotenv_values

from cowriter.config import DEFAULT_OPENAI_MODEL, get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "OPENAI_API_KEY",
        "MODEL_NAME",
        "LLAMA_MODEL_NAME",
        "DEBUG",
        "ALLOWED_ORIGINS",
        "COWRITER_LLM_TIMEOUT_S",
        "COWRITER_TEMPERATURE",
        "COWRITER_API_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGetSettings:
    def test_defaults(self, clean_env):
        s = get_settings()

        assert s.openai_api_key == ""
        assert s.model_name == DEFAULT_OPENAI_MODEL
        assert s.debug is False
        assert s.allowed_origins == ["http://localhost:3000"]
        assert s.llm_timeout_seconds == 60.0
        assert s.api_url == "http://localhost:8000"

    def test_origins_split(self, clean_env):
        clean_env.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
        assert get_settings().allowed_origins == ["http://a.test", "http://b.test"]

    def test_origins_inline_comment_from_dotenv(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ALLOWED_ORIGINS=http://a.test,http://b.test  # Comma-separated list\n")
        clean_env.setenv("ALLOWED_ORIGINS", dotenv_values(env_file)["ALLOWED_ORIGINS"])

        assert get_settings().allowed_origins == ["http://a.test", "http://b.test"]

    @pytest.mark.parametrize("raw,expected", [("True", True), ("1", True), ("false", False), ("", False)])
    def test_debug_flag(self, clean_env, raw, expected):
        clean_env.setenv("DEBUG", raw)
        assert get_settings().debug is expected

    def test_bad_float_falls_back(self, clean_env):
        clean_env.setenv("COWRITER_LLM_TIMEOUT_S", "soon")
        assert get_settings().llm_timeout_seconds == 60.0

    def test_model_and_key(self, clean_env):
        clean_env.setenv("OPENAI_API_KEY", " sk-env ")
        clean_env.setenv("MODEL_NAME", "gpt-4o")

        s = get_settings()

        assert s.openai_api_key == "sk-env"
        assert s.model_name == "gpt-4o"
