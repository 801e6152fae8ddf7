"""Chat Agent - plain conversation, no tools."""

from typing import Any, Dict, Optional

from surrogate.models.schemas import AgentResult, AgentType
from surrogate.services.agents.base_agent import BaseAgent


class ChatAgent(BaseAgent):
    """Pass-through so every AgentType resolves to a handler."""

    agent_type = AgentType.CHAT

    async def handle(self, command: str, parameters: Optional[Dict[str, Any]] = None) -> AgentResult:
        return AgentResult.ok(message="")
