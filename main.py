# FILE: main.py
"""
CoWriter Backend - FastAPI Application
Version: 0.1.0

Thin relay between the CoWriter UI and an LLM provider:
- POST /api/connect_llm    - connect to OpenAI or a Llama.cpp server
- POST /api/submit_action  - run a text-transformation action
- POST /api/chat           - chat with optional editor context

Run:
    uvicorn main:app --reload
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# cowriter.config loads .env before anything reads env vars
from cowriter import __version__
from cowriter.config import Settings, get_settings
from cowriter.endpoints import router as api_router

logger = logging.getLogger("cowriter")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="CoWriter",
        version=__version__,
        description="Writing assistant backend relaying to OpenAI or Llama.cpp",
        debug=settings.debug,
    )

    # ====== CORS ======

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ====== STARTUP ======

    @app.on_event("startup")
    def on_startup():
        logger.info("[startup] CoWriter %s", __version__)
        logger.info("[startup] Allowed origins: %s", ", ".join(settings.allowed_origins))
        if settings.openai_api_key:
            logger.info("[startup] OPENAI_API_KEY: [OK] set (used when the UI sends no key)")
        else:
            logger.info("[startup] OPENAI_API_KEY: [X] not set - the UI must supply a key")
        logger.info("[startup] OpenAI model: %s", settings.model_name)
        logger.info("[startup] No LLM connected yet - POST /api/connect_llm")

    # ====== ROUTERS ======

    app.include_router(api_router)

    return app


_settings = get_settings()
configure_logging(_settings)
app = create_app(_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=_settings.debug)
