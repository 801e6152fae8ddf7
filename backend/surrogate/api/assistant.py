"""API endpoint for stateless assistant replies."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from surrogate.api.dependencies import orchestrator_dependency
from surrogate.models.schemas import ReplyEnvelope
from surrogate.services.response_orchestrator import ResponseOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


class RespondRequest(BaseModel):
    """One user turn with its condensed history."""
    message: str = ""
    history: List[str] = Field(default_factory=list)
    image: Optional[str] = Field(None, description="Base64 image, data URL or bare")


@router.post("/respond", response_model=ReplyEnvelope)
async def respond(
    request: RespondRequest,
    orchestrator: ResponseOrchestrator = Depends(orchestrator_dependency),
):
    """
    Interpret a message, run the selected agent command and return the reply envelope.

    Processing failures come back as a normal envelope with tone "Error";
    only an empty request is rejected.
    """
    if not request.message.strip() and not request.image:
        raise HTTPException(status_code=400, detail="Message or image is required")

    return await orchestrator.respond(request.message, request.history, request.image)
