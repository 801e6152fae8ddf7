"""API endpoints for calendar events."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from surrogate.api.dependencies import schedule_agent_dependency, store_dependency
from surrogate.services.agents.schedule_agent import ScheduleAgent, event_with_link
from surrogate.services.store import SurrogateStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_events(store: SurrogateStore = Depends(store_dependency)):
    """All stored events (including cancelled), each with its calendar invite link."""
    return [event_with_link(event) for event in await store.get_events()]


@router.post("/{event_id}/confirm")
async def confirm_event(event_id: str, agent: ScheduleAgent = Depends(schedule_agent_dependency)):
    event = await agent.confirm(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=f"Event {event_id} not found")
    return event_with_link(event)


@router.post("/{event_id}/cancel")
async def cancel_event(event_id: str, agent: ScheduleAgent = Depends(schedule_agent_dependency)):
    event = await agent.cancel(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=f"Event {event_id} not found")
    return event_with_link(event)


@router.delete("/{event_id}")
async def delete_event(event_id: str, agent: ScheduleAgent = Depends(schedule_agent_dependency)):
    """Explicit cancel-delete: removes the event record."""
    if not await agent.remove(event_id):
        raise HTTPException(status_code=404, detail=f"Event {event_id} not found")
    return {"status": "deleted", "id": event_id}
