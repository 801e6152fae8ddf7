"""
Email Agent - prepares email drafts.

Nothing is sent from here: the draft is recorded for history and returned
with a mailto: link and a webmail compose link for the user to send.
"""

from datetime import datetime, timezone

from surrogate.models.agent_schemas import SendEmailParams
from surrogate.models.schemas import AgentResult, AgentType, Email, PayloadKind
from surrogate.services.agents.base_agent import BaseAgent
from surrogate.services.store import new_record_id
from surrogate.utils.links import mailto_link, webmail_link


class EmailAgent(BaseAgent):
    agent_type = AgentType.EMAIL

    COMMANDS = {
        "send_email": (SendEmailParams, "send_email"),
    }
    INVALID_MESSAGES = {
        "send_email": "Missing 'to', 'subject', or 'body' for email.",
    }
    UNKNOWN_COMMAND_MESSAGE = "Unknown email action."

    async def send_email(self, params: SendEmailParams) -> AgentResult:
        email = Email(
            id=new_record_id(),
            to=params.to,
            subject=params.subject,
            body=params.body,
            sent_at=datetime.now(timezone.utc),
        )
        await self.store.add_email(email)

        return AgentResult.ok(
            message=f"Email draft prepared for {email.to}.",
            data={
                **email.to_wire(),
                "mailtoLink": mailto_link(email.to, email.subject, email.body),
                "webmailLink": webmail_link(email.to, email.subject, email.body),
            },
            payload_kind=PayloadKind.EMAIL,
        )
