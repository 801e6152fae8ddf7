"""
Schedule Agent - calendar event management.

Events are created as "pending" and confirmed or cancelled in later turns.
Every event returned to the caller carries a derived calendar invite link.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from surrogate.models.agent_schemas import CommandParams, CreateEventParams, EventRefParams
from surrogate.models.schemas import AgentResult, AgentType, CalendarEvent, EventStatus, PayloadKind
from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.store import new_record_id
from surrogate.utils.links import calendar_invite_url

logger = logging.getLogger(__name__)


def event_with_link(event: CalendarEvent) -> Dict[str, Any]:
    """Wire form of an event plus its calendar invite link."""
    return {**event.to_wire(), "calendarUrl": calendar_invite_url(event)}


class ScheduleAgent(BaseAgent):
    """Creates, lists, confirms and cancels calendar events."""

    agent_type = AgentType.SCHEDULE

    COMMANDS = {
        "create_event": (CreateEventParams, "create_event"),
        "list_events": (CommandParams, "list_events"),
        "confirm_event": (EventRefParams, "confirm_event"),
        "cancel_event": (EventRefParams, "cancel_event"),
    }
    INVALID_MESSAGES = {
        "create_event": "Missing title or time for event.",
        "confirm_event": "Missing event id to confirm.",
        "cancel_event": "Missing event id to cancel.",
    }
    UNKNOWN_COMMAND_MESSAGE = "Unknown schedule action."

    MAX_LISTED_EVENTS = 3

    async def create_event(self, params: CreateEventParams) -> AgentResult:
        event = CalendarEvent(
            id=new_record_id(),
            title=params.title,
            date=params.date or datetime.now(timezone.utc).date().isoformat(),
            time=params.time,
            description=params.description or "",
            status=EventStatus.PENDING,
        )
        await self.store.add_event(event)

        return AgentResult.ok(
            message=f'I\'ve prepared an event for "{event.title}". Please confirm details below.',
            data=event_with_link(event),
            payload_kind=PayloadKind.EVENT,
        )

    async def list_events(self, params: CommandParams) -> AgentResult:
        """Most recent non-cancelled events (at most MAX_LISTED_EVENTS)."""
        events = await self.store.get_events()
        upcoming = [e for e in events if e.status != EventStatus.CANCELLED][-self.MAX_LISTED_EVENTS:]

        if upcoming:
            message = f"You have {len(upcoming)} upcoming events."
        else:
            message = "Your schedule is clear."

        return AgentResult.ok(
            message=message,
            data=[event_with_link(e) for e in upcoming],
            payload_kind=PayloadKind.EVENT,
        )

    async def confirm_event(self, params: EventRefParams) -> AgentResult:
        event = await self.confirm(params.id)
        if event is None:
            return AgentResult.fail(f"No event found with id {params.id}.")
        return AgentResult.ok(
            message=f'Event "{event.title}" is confirmed.',
            data=event_with_link(event),
            payload_kind=PayloadKind.EVENT,
        )

    async def cancel_event(self, params: EventRefParams) -> AgentResult:
        event = await self.cancel(params.id)
        if event is None:
            return AgentResult.fail(f"No event found with id {params.id}.")
        return AgentResult.ok(
            message=f'Event "{event.title}" has been cancelled.',
            data=event_with_link(event),
            payload_kind=PayloadKind.EVENT,
        )

    # --- Status transitions (shared with the HTTP layer) ---

    async def confirm(self, event_id: str) -> Optional[CalendarEvent]:
        logger.info(f"Confirming event {event_id}")
        return await self.store.update_event(event_id, {"status": EventStatus.CONFIRMED.value})

    async def cancel(self, event_id: str) -> Optional[CalendarEvent]:
        """Mark an event cancelled. The record is kept and hidden from listings."""
        logger.info(f"Cancelling event {event_id}")
        return await self.store.update_event(event_id, {"status": EventStatus.CANCELLED.value})

    async def remove(self, event_id: str) -> bool:
        """Physically delete an event (explicit cancel-delete)."""
        logger.info(f"Deleting event {event_id}")
        return await self.store.delete_event(event_id)
