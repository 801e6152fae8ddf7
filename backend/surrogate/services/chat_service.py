"""
Chat session service.

Keeps the conversation transcript: each user turn is answered through the
ResponseOrchestrator and both messages are appended to the stored session.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from surrogate.models.schemas import ChatMessage, ChatSession, ReplyEnvelope, Sender
from surrogate.services.response_orchestrator import ResponseOrchestrator
from surrogate.services.store import NEW_CHAT_TITLE, SurrogateStore, new_record_id

logger = logging.getLogger(__name__)

TITLE_LENGTH = 25


class SessionNotFoundError(LookupError):
    """Raised when a chat session id is unknown."""


def format_history(messages: List[ChatMessage]) -> List[str]:
    """Condense prior turns to "<sender>: <text>" lines."""
    return [f"{m.sender.value}: {m.text}" for m in messages]


def derive_title(text: str) -> str:
    """Session title from the first user message."""
    title = text[:TITLE_LENGTH]
    return f"{title}..." if len(text) > TITLE_LENGTH else title


class ChatService:
    def __init__(self, store: SurrogateStore, orchestrator: ResponseOrchestrator):
        self.store = store
        self.orchestrator = orchestrator

    async def create_session(self) -> ChatSession:
        session = await self.store.create_chat()
        logger.info(f"Created chat session {session.id}")
        return session

    async def send_message(
        self,
        session_id: str,
        text: str,
        image: Optional[str] = None,
    ) -> Tuple[ChatSession, ReplyEnvelope]:
        """
        Answer one user turn and record it in the session.

        Returns:
            (updated session, reply envelope)

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = await self.store.get_chat(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        history = format_history(session.messages)
        user_message = ChatMessage(
            id=new_record_id(),
            text=text,
            sender=Sender.USER,
            timestamp=datetime.now(timezone.utc),
        )

        envelope = await self.orchestrator.respond(text, history, image)

        agent_message = ChatMessage(
            id=new_record_id(),
            text=envelope.text,
            sender=Sender.AGENT,
            timestamp=datetime.now(timezone.utc),
            tone=envelope.tone,
            language=envelope.language,
            processing_agent=envelope.agent,
            payload=envelope.payload,
            payload_kind=envelope.payload_kind,
        )

        session.messages.extend([user_message, agent_message])
        session.last_message = agent_message.text
        session.updated_at = datetime.now(timezone.utc)
        if session.title == NEW_CHAT_TITLE and text:
            session.title = derive_title(text)

        await self.store.save_chat(session)
        return session, envelope
