"""Search Agent - placeholder web search results."""

import logging
from typing import Any, Dict, Optional

from surrogate.models.agent_schemas import WebSearchParams
from surrogate.models.schemas import AgentResult, AgentType, PayloadKind, SearchHit, SearchResult
from surrogate.services.agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)


class SearchAgent(BaseAgent):
    """
    Returns three fixed-shape results keyed off the query.

    Retrieval itself is out of scope; this agent never fails, whatever
    command name the model picked.
    """

    agent_type = AgentType.SEARCH

    COMMANDS = {
        "web_search": (WebSearchParams, "web_search"),
    }

    async def handle(self, command: str, parameters: Optional[Dict[str, Any]] = None) -> AgentResult:
        if command not in self.COMMANDS:
            logger.info(f"{self.agent_name}: treating '{command}' as web_search")
        params = self._validate("web_search", WebSearchParams, parameters or {})
        if isinstance(params, AgentResult):
            params = WebSearchParams()
        return await self.web_search(params)

    async def web_search(self, params: WebSearchParams) -> AgentResult:
        query = params.query
        result = SearchResult(
            query=query,
            results=[
                SearchHit(
                    title=f"{query} - Wikipedia",
                    snippet="Detailed information about the topic found on the free encyclopedia...",
                    source="wikipedia.org",
                ),
                SearchHit(
                    title=f"Latest News: {query}",
                    snippet="Breaking news and updates regarding your search query...",
                    source="news.google.com",
                ),
                SearchHit(
                    title=f"Images for {query}",
                    snippet="View high resolution images...",
                    source="images.google.com",
                ),
            ],
        )

        return AgentResult.ok(
            message=f'Here is what I found for "{query}".',
            data=result.to_wire(),
            payload_kind=PayloadKind.SEARCH_RESULT,
        )
