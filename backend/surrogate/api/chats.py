"""API endpoints for chat sessions."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from surrogate.api.dependencies import chat_service_dependency, store_dependency
from surrogate.models.schemas import ChatSession, ReplyEnvelope
from surrogate.services.chat_service import ChatService, SessionNotFoundError
from surrogate.services.store import SurrogateStore

logger = logging.getLogger(__name__)

router = APIRouter()


class SendMessageRequest(BaseModel):
    text: str = ""
    image: Optional[str] = Field(None, description="Base64 image, data URL or bare")


class SendMessageResponse(BaseModel):
    """Reply envelope plus the updated session."""
    reply: ReplyEnvelope
    session: ChatSession


@router.get("", response_model=List[ChatSession])
async def list_chats(store: SurrogateStore = Depends(store_dependency)):
    """All chat sessions, most recently updated first."""
    return await store.get_chats()


@router.post("", response_model=ChatSession, status_code=201)
async def create_chat(service: ChatService = Depends(chat_service_dependency)):
    return await service.create_session()


@router.delete("")
async def clear_chats(store: SurrogateStore = Depends(store_dependency)):
    await store.clear_all_chats()
    return {"status": "cleared"}


@router.get("/{session_id}", response_model=ChatSession)
async def get_chat(session_id: str, store: SurrogateStore = Depends(store_dependency)):
    session = await store.get_chat(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Chat session {session_id} not found")
    return session


@router.delete("/{session_id}")
async def delete_chat(session_id: str, store: SurrogateStore = Depends(store_dependency)):
    if not await store.delete_chat(session_id):
        raise HTTPException(status_code=404, detail=f"Chat session {session_id} not found")
    return {"status": "deleted", "id": session_id}


@router.post("/{session_id}/messages", response_model=SendMessageResponse)
async def send_message(
    session_id: str,
    request: SendMessageRequest,
    service: ChatService = Depends(chat_service_dependency),
):
    """
    Send a user message within a session.

    This endpoint:
    1. Condenses the session transcript into history lines
    2. Gets the assistant reply (running any agent command)
    3. Appends both messages and retitles a new conversation
    """
    if not request.text.strip() and not request.image:
        raise HTTPException(status_code=400, detail="Message text or image is required")

    try:
        session, reply = await service.send_message(session_id, request.text, request.image)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail=f"Chat session {session_id} not found")

    logger.info(f"Session {session_id}: replied via {reply.agent.value}")
    return SendMessageResponse(reply=reply, session=session)
