# FILE: cowriter/actions/router.py
"""
Action endpoint.

- POST /api/submit_action - transform editor text with a named action
"""

from fastapi import APIRouter, Depends, HTTPException

from cowriter.actions import service as action_service
from cowriter.actions.schemas import ActionRequest, ActionResponse
from cowriter.errors import CoWriterError
from cowriter.llm.connector import LLMConnector, get_connector

router = APIRouter(prefix="/api", tags=["Actions"])


@router.post("/submit_action", response_model=ActionResponse)
async def submit_action(
    req: ActionRequest,
    connector: LLMConnector = Depends(get_connector),
) -> ActionResponse:
    try:
        text = await action_service.execute(
            connector,
            action_name=req.action,
            action_description=req.action_description,
            text=req.text,
            about_me=req.about_me,
            style=req.preferred_style,
            tone=req.tone,
        )
    except CoWriterError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return ActionResponse(text=text)
