"""Docs Agent - drafts text documents."""

from datetime import datetime, timezone

from surrogate.models.agent_schemas import CreateDocParams
from surrogate.models.schemas import AgentResult, AgentType, PayloadKind, TextDocument
from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.store import new_record_id


class DocsAgent(BaseAgent):
    agent_type = AgentType.DOCS

    COMMANDS = {
        "create_doc": (CreateDocParams, "create_doc"),
    }
    INVALID_MESSAGES = {
        "create_doc": "No content provided for document.",
    }
    UNKNOWN_COMMAND_MESSAGE = "Unknown doc action."

    async def create_doc(self, params: CreateDocParams) -> AgentResult:
        document = TextDocument(
            id=new_record_id(),
            title=params.title,
            content=params.content,
            created_at=datetime.now(timezone.utc),
        )
        await self.store.add_document(document)

        return AgentResult.ok(
            message=f'Document "{document.title}" created successfully.',
            data=document.to_wire(),
            payload_kind=PayloadKind.DOC,
        )
