from fastapi import APIRouter, Depends

from cowriter.llm.connector import LLMConnector, get_connector

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health")
async def health(connector: LLMConnector = Depends(get_connector)) -> dict:
    """Liveness check. Does not contact the LLM."""
    return {"status": "ok", "llm_connected": connector.is_connected}
