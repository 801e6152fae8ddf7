"""Unit tests for the JSON collection store."""

import asyncio
import json
from datetime import datetime, timedelta, timezone

import pytest

from surrogate.models.schemas import CalendarEvent, ChatSession, EventStatus, UserContext
from surrogate.services.store import Collection, SurrogateStore
from surrogate.utils.file_storage import StoreError


def make_event(event_id: str, title: str = "Standup") -> CalendarEvent:
    return CalendarEvent(id=event_id, title=title, date="2026-03-01", time="09:00")


class TestGenericCrud:
    """Test collection-level operations."""

    @pytest.mark.asyncio
    async def test_empty_collection(self, store):
        """Test that a missing collection reads as empty."""
        assert await store.get_all(Collection.DOCUMENTS) == []
        assert await store.get_one(Collection.DOCUMENTS, "1") is None

    @pytest.mark.asyncio
    async def test_create_preserves_insertion_order(self, store):
        """Test that records come back in the order they were created."""
        for i in range(3):
            await store.create(Collection.EMAILS, {"id": str(i)})
        assert [r["id"] for r in await store.get_all(Collection.EMAILS)] == ["0", "1", "2"]

    @pytest.mark.asyncio
    async def test_update_is_shallow_merge(self, store):
        """Test that update keeps fields it does not mention."""
        await store.create(Collection.EVENTS, {"id": "1", "title": "A", "status": "pending"})

        updated = await store.update(Collection.EVENTS, "1", {"status": "confirmed"})

        assert updated == {"id": "1", "title": "A", "status": "confirmed"}
        assert await store.get_one(Collection.EVENTS, "1") == updated

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, store):
        """Test updating an unknown id."""
        assert await store.update(Collection.EVENTS, "nope", {"status": "confirmed"}) is None

    @pytest.mark.asyncio
    async def test_delete(self, store):
        """Test that delete reports whether a record was removed."""
        await store.create(Collection.PAYMENTS, {"id": "1"})
        await store.create(Collection.PAYMENTS, {"id": "2"})

        assert await store.delete(Collection.PAYMENTS, "1") is True
        assert await store.delete(Collection.PAYMENTS, "1") is False
        assert [r["id"] for r in await store.get_all(Collection.PAYMENTS)] == ["2"]

    @pytest.mark.asyncio
    async def test_upsert_replaces_or_appends(self, store):
        """Test upsert on existing and new ids."""
        await store.upsert(Collection.CHATS, {"id": "1", "title": "A"})
        await store.upsert(Collection.CHATS, {"id": "2", "title": "B"})
        await store.upsert(Collection.CHATS, {"id": "1", "title": "A2"})

        records = await store.get_all(Collection.CHATS)
        assert records == [{"id": "1", "title": "A2"}, {"id": "2", "title": "B"}]

    @pytest.mark.asyncio
    async def test_records_persist_across_instances(self, tmp_path):
        """Test that a second store on the same directory sees earlier writes."""
        data_dir = str(tmp_path / "shared")
        await SurrogateStore(data_dir).add_event(make_event("1"))

        events = await SurrogateStore(data_dir).get_events()
        assert events == [make_event("1")]

    @pytest.mark.asyncio
    async def test_corrupt_collection_raises(self, store):
        """Test that unreadable JSON surfaces as StoreError."""
        (store.data_dir / "events.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError):
            await store.get_events()

    @pytest.mark.asyncio
    async def test_non_list_collection_raises(self, store):
        """Test that a collection file holding an object surfaces as StoreError."""
        (store.data_dir / "events.json").write_text(json.dumps({"id": "1"}), encoding="utf-8")
        with pytest.raises(StoreError):
            await store.get_events()

    @pytest.mark.asyncio
    async def test_overlapping_writes_do_not_fail(self, store):
        """Test that concurrent writers to one collection all complete."""
        for round_number in range(10):
            events = [make_event(f"{round_number}-{i}") for i in range(8)]

            await asyncio.gather(*(store.add_event(event) for event in events))

            stored = await store.get_events()
            assert len(stored) >= 1

        assert list(store.data_dir.glob("*.tmp")) == []


class TestTypedAccess:
    """Test the typed record helpers."""

    @pytest.mark.asyncio
    async def test_events_are_stored_in_wire_form(self, store):
        """Test the camelCase on-disk shape of an event."""
        await store.add_event(make_event("1"))

        raw = json.loads((store.data_dir / "events.json").read_text(encoding="utf-8"))
        assert raw == [{
            "id": "1",
            "title": "Standup",
            "date": "2026-03-01",
            "time": "09:00",
            "description": "",
            "status": "pending",
        }]

    @pytest.mark.asyncio
    async def test_update_event_status(self, store):
        """Test changing an event's status."""
        await store.add_event(make_event("1"))

        event = await store.update_event("1", {"status": "cancelled"})

        assert event.status == EventStatus.CANCELLED
        assert (await store.get_event("1")).status == EventStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_create_chat(self, store):
        """Test that a new session is empty, titled and persisted."""
        session = await store.create_chat()

        assert session.title == "New Conversation"
        assert session.messages == []
        assert session.updated_at.tzinfo is not None
        assert await store.get_chat(session.id) == session

    @pytest.mark.asyncio
    async def test_chats_sorted_newest_first(self, store):
        """Test session ordering, deletion and clearing."""
        now = datetime.now(timezone.utc)
        await store.save_chat(ChatSession(id="old", updated_at=now - timedelta(hours=1)))
        await store.save_chat(ChatSession(id="new", updated_at=now))

        assert [c.id for c in await store.get_chats()] == ["new", "old"]

        assert await store.delete_chat("old") is True
        await store.clear_all_chats()
        assert await store.get_chats() == []

    @pytest.mark.asyncio
    async def test_user_context_defaults_and_save(self, store):
        """Test default user settings and saving new ones."""
        default = await store.get_user_context()
        assert default.name == "Boss"
        assert default.has_seen_intro is False

        await store.save_user_context(UserContext(name="Ayesha", preferred_language="ur", has_seen_intro=True))

        saved = await store.get_user_context()
        assert saved.name == "Ayesha"
        assert saved.preferred_language == "ur"

    @pytest.mark.asyncio
    async def test_clear_all_data(self, store):
        """Test that clearing removes every collection."""
        await store.add_event(make_event("1"))
        await store.save_user_context(UserContext(name="Sam"))

        await store.clear_all_data()

        assert await store.get_events() == []
        assert (await store.get_user_context()).name == "Boss"
