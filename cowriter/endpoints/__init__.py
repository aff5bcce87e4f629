"""
Endpoint routers for the CoWriter API.
"""

from fastapi import APIRouter

from cowriter.actions.router import router as actions_router
from cowriter.chat.router import router as chat_router
from cowriter.endpoints.health import router as health_router
from cowriter.llm.router import router as llm_router

# Combined router for all endpoints
router = APIRouter()
router.include_router(llm_router)
router.include_router(actions_router)
router.include_router(chat_router)
router.include_router(health_router)

__all__ = [
    "router",
    "llm_router",
    "actions_router",
    "chat_router",
    "health_router",
]
