"""
Agent handlers.

One handler per agent type:
- ScheduleAgent: calendar events
- DocsAgent: document drafts
- EmailAgent: email drafts with mail links
- PaymentAgent: simulated payments
- FinanceAgent: market reports
- SearchAgent: placeholder search results
- ChatAgent: plain conversation
"""

from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.agents.chat_agent import ChatAgent
from surrogate.services.agents.docs_agent import DocsAgent
from surrogate.services.agents.email_agent import EmailAgent
from surrogate.services.agents.finance_agent import FinanceAgent
from surrogate.services.agents.payment_agent import PaymentAgent
from surrogate.services.agents.registry import AgentRegistry
from surrogate.services.agents.schedule_agent import ScheduleAgent
from surrogate.services.agents.search_agent import SearchAgent

__all__ = [
    "AgentRegistry",
    "BaseAgent",
    "ChatAgent",
    "DocsAgent",
    "EmailAgent",
    "FinanceAgent",
    "PaymentAgent",
    "ScheduleAgent",
    "SearchAgent",
]
