"""Shared FastAPI dependencies (overridable in tests)."""

from fastapi import Depends

from surrogate.services.agents.schedule_agent import ScheduleAgent
from surrogate.services.chat_service import ChatService
from surrogate.services.response_orchestrator import ResponseOrchestrator, get_orchestrator
from surrogate.services.store import SurrogateStore, get_store


def store_dependency() -> SurrogateStore:
    return get_store()


def orchestrator_dependency() -> ResponseOrchestrator:
    return get_orchestrator()


def chat_service_dependency(
    store: SurrogateStore = Depends(store_dependency),
    orchestrator: ResponseOrchestrator = Depends(orchestrator_dependency),
) -> ChatService:
    return ChatService(store, orchestrator)


def schedule_agent_dependency(store: SurrogateStore = Depends(store_dependency)) -> ScheduleAgent:
    return ScheduleAgent(store)
