"""
Agent registry: maps every AgentType to its handler.

The registry is total. Construction fails if any AgentType lacks a
handler, so lookups never miss at request time.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from surrogate.models.schemas import AgentResult, AgentType
from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.agents.chat_agent import ChatAgent
from surrogate.services.agents.docs_agent import DocsAgent
from surrogate.services.agents.email_agent import EmailAgent
from surrogate.services.agents.finance_agent import FinanceAgent
from surrogate.services.agents.payment_agent import PaymentAgent
from surrogate.services.agents.schedule_agent import ScheduleAgent
from surrogate.services.agents.search_agent import SearchAgent
from surrogate.services.store import SurrogateStore

logger = logging.getLogger(__name__)

DEFAULT_AGENT_CLASSES = (
    ChatAgent,
    ScheduleAgent,
    DocsAgent,
    SearchAgent,
    EmailAgent,
    PaymentAgent,
    FinanceAgent,
)


class AgentRegistry:
    """Dispatches (agent, command, parameters) to the matching handler."""

    def __init__(self, store: SurrogateStore, agents: Optional[Iterable[BaseAgent]] = None):
        """
        Args:
            store: Store shared by the default handlers
            agents: Handler instances to register instead of the defaults

        Raises:
            ValueError: If some AgentType has no handler
        """
        if agents is None:
            agents = [agent_class(store) for agent_class in DEFAULT_AGENT_CLASSES]

        self._agents: Dict[AgentType, BaseAgent] = {agent.agent_type: agent for agent in agents}

        missing = [agent_type.value for agent_type in AgentType if agent_type not in self._agents]
        if missing:
            raise ValueError(f"No handler registered for: {', '.join(missing)}")

    def get(self, agent_type: AgentType) -> BaseAgent:
        return self._agents[agent_type]

    async def dispatch(
        self,
        agent_type: AgentType,
        command: str,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> AgentResult:
        agent = self.get(agent_type)
        logger.info(f"Routing to {agent_type.value} ({command})")
        return await agent.handle(command, parameters or {})
