"""
Persistent key-value store for conversations and agent records.

Each collection is a JSON file under the data directory. Operations are
async (file I/O runs in a worker thread) and follow a read-modify-write
pattern without locking: concurrent writers to the same collection race
and the last writer wins. Callers issue at most one in-flight request per
conversation session.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from surrogate.config import settings
from surrogate.models.schemas import (
    CalendarEvent,
    ChatSession,
    Email,
    PaymentTransaction,
    TextDocument,
    UserContext,
)
from surrogate.utils.file_storage import FileStorage, StoreError

logger = logging.getLogger(__name__)

NEW_CHAT_TITLE = "New Conversation"


def new_record_id() -> str:
    """Timestamp-based record id, unique per creation."""
    return str(time.time_ns())


class Collection(str, Enum):
    """Store partitions (one JSON file each)"""
    CHATS = "chats"
    SETTINGS = "settings"
    EVENTS = "events"
    DOCUMENTS = "documents"
    EMAILS = "emails"
    PAYMENTS = "payments"


class SurrogateStore:
    """
    CRUD over the JSON collections.

    Records are stored in their camelCase wire form and returned as
    pydantic models, so date fields come back as datetime objects.
    """

    def __init__(self, data_dir: Optional[str] = None):
        """
        Args:
            data_dir: Directory holding the collection files (default: settings.data_dir)
        """
        self.data_dir = Path(data_dir or settings.data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    # --- File access ---

    def _read_sync(self, collection: Collection) -> Any:
        return FileStorage.load_json(str(self.data_dir), collection.value)

    def _write_sync(self, collection: Collection, data: Any) -> None:
        FileStorage.save_json(data, str(self.data_dir), collection.value)

    async def _read(self, collection: Collection) -> Any:
        return await asyncio.to_thread(self._read_sync, collection)

    async def _write(self, collection: Collection, data: Any) -> None:
        await asyncio.to_thread(self._write_sync, collection, data)

    async def _read_records(self, collection: Collection) -> List[Dict[str, Any]]:
        data = await self._read(collection)
        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreError(f"Collection '{collection.value}' is not a list")
        return data

    # --- Generic CRUD ---

    async def get_all(self, collection: Collection) -> List[Dict[str, Any]]:
        """Return every record in a collection, in insertion order."""
        return await self._read_records(collection)

    async def get_one(self, collection: Collection, record_id: str) -> Optional[Dict[str, Any]]:
        for record in await self._read_records(collection):
            if record.get("id") == record_id:
                return record
        return None

    async def create(self, collection: Collection, record: Dict[str, Any]) -> Dict[str, Any]:
        """Append a record."""
        records = await self._read_records(collection)
        records.append(record)
        await self._write(collection, records)
        logger.info(f"Stored {collection.value} record {record.get('id')}")
        return record

    async def update(
        self,
        collection: Collection,
        record_id: str,
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Shallow-merge updates into a record.

        Returns:
            The updated record, or None if no record has that id
        """
        records = await self._read_records(collection)
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                records[index] = {**record, **updates}
                await self._write(collection, records)
                return records[index]
        return None

    async def upsert(self, collection: Collection, record: Dict[str, Any]) -> Dict[str, Any]:
        records = await self._read_records(collection)
        for index, existing in enumerate(records):
            if existing.get("id") == record.get("id"):
                records[index] = record
                break
        else:
            records.append(record)
        await self._write(collection, records)
        return record

    async def delete(self, collection: Collection, record_id: str) -> bool:
        """
        Remove a record.

        Returns:
            True if a record was removed
        """
        records = await self._read_records(collection)
        remaining = [r for r in records if r.get("id") != record_id]
        if len(remaining) == len(records):
            return False
        await self._write(collection, remaining)
        logger.info(f"Deleted {collection.value} record {record_id}")
        return True

    async def clear(self, collection: Collection) -> None:
        await asyncio.to_thread(FileStorage.delete_json, str(self.data_dir), collection.value)

    # --- Calendar events ---

    async def get_events(self) -> List[CalendarEvent]:
        return [CalendarEvent.model_validate(r) for r in await self.get_all(Collection.EVENTS)]

    async def get_event(self, event_id: str) -> Optional[CalendarEvent]:
        record = await self.get_one(Collection.EVENTS, event_id)
        return CalendarEvent.model_validate(record) if record else None

    async def add_event(self, event: CalendarEvent) -> CalendarEvent:
        await self.create(Collection.EVENTS, event.to_wire())
        return event

    async def update_event(self, event_id: str, updates: Dict[str, Any]) -> Optional[CalendarEvent]:
        record = await self.update(Collection.EVENTS, event_id, updates)
        return CalendarEvent.model_validate(record) if record else None

    async def delete_event(self, event_id: str) -> bool:
        return await self.delete(Collection.EVENTS, event_id)

    # --- Documents, emails, payments (append-only) ---

    async def get_documents(self) -> List[TextDocument]:
        return [TextDocument.model_validate(r) for r in await self.get_all(Collection.DOCUMENTS)]

    async def add_document(self, document: TextDocument) -> TextDocument:
        await self.create(Collection.DOCUMENTS, document.to_wire())
        return document

    async def get_emails(self) -> List[Email]:
        return [Email.model_validate(r) for r in await self.get_all(Collection.EMAILS)]

    async def add_email(self, email: Email) -> Email:
        await self.create(Collection.EMAILS, email.to_wire())
        return email

    async def get_payments(self) -> List[PaymentTransaction]:
        return [PaymentTransaction.model_validate(r) for r in await self.get_all(Collection.PAYMENTS)]

    async def add_payment(self, transaction: PaymentTransaction) -> PaymentTransaction:
        await self.create(Collection.PAYMENTS, transaction.to_wire())
        return transaction

    # --- Chat sessions ---

    async def get_chats(self) -> List[ChatSession]:
        """All sessions, most recently updated first."""
        chats = [ChatSession.model_validate(r) for r in await self.get_all(Collection.CHATS)]
        return sorted(chats, key=lambda c: c.updated_at, reverse=True)

    async def get_chat(self, session_id: str) -> Optional[ChatSession]:
        record = await self.get_one(Collection.CHATS, session_id)
        return ChatSession.model_validate(record) if record else None

    async def save_chat(self, session: ChatSession) -> ChatSession:
        await self.upsert(Collection.CHATS, session.to_wire())
        return session

    async def create_chat(self) -> ChatSession:
        """Start an empty session titled NEW_CHAT_TITLE."""
        session = ChatSession(
            id=new_record_id(),
            title=NEW_CHAT_TITLE,
            updated_at=datetime.now(timezone.utc),
        )
        return await self.save_chat(session)

    async def delete_chat(self, session_id: str) -> bool:
        return await self.delete(Collection.CHATS, session_id)

    async def clear_all_chats(self) -> None:
        await self.clear(Collection.CHATS)

    # --- User settings ---

    async def get_user_context(self) -> UserContext:
        data = await self._read(Collection.SETTINGS)
        if isinstance(data, dict):
            return UserContext.model_validate(data)
        return UserContext(
            name=settings.default_user_name,
            preferred_language=settings.default_language,
        )

    async def save_user_context(self, context: UserContext) -> UserContext:
        await self._write(Collection.SETTINGS, context.to_wire())
        return context

    async def clear_all_data(self) -> None:
        """Remove every collection file."""
        for collection in Collection:
            await self.clear(collection)
        logger.info(f"Cleared all data in {self.data_dir}")


_store: Optional[SurrogateStore] = None


def get_store() -> SurrogateStore:
    """Process-wide store bound to settings.data_dir."""
    global _store
    if _store is None:
        _store = SurrogateStore()
    return _store
