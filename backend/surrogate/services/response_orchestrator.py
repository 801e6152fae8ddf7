"""
Response Orchestrator.

Turns one user message into a ReplyEnvelope:
1. Short-circuit to an offline reply when no model credential is configured
2. Gather request context (time, events, user name) and build the system instruction
3. Call the model transport
4. Extract and parse the JSON intent from the raw reply
5. Dispatch the intent's command to the selected agent handler
6. Merge the handler result into the reply envelope

Every failure in steps 2-6 is converted to the fixed processing-error
envelope here; nothing is raised to the caller.
"""

import logging
from datetime import datetime
from typing import List, Optional

from surrogate.config import settings
from surrogate.models.schemas import Intent, ReplyEnvelope, RequestContext
from surrogate.services.agents.registry import AgentRegistry
from surrogate.services.instructions import build_system_instruction
from surrogate.services.llm_service import AnthropicTransport, build_messages
from surrogate.services.store import SurrogateStore, get_store
from surrogate.utils.json_extractor import parse_json_object

logger = logging.getLogger(__name__)


class ResponseOrchestrator:
    """Interprets model replies and dispatches them to agent handlers."""

    def __init__(
        self,
        store: Optional[SurrogateStore] = None,
        transport=None,
        api_key: Optional[str] = None,
        registry: Optional[AgentRegistry] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            store: Persistent store (default: process-wide store)
            transport: Object with `async complete(system, messages) -> str`.
                       Defaults to an AnthropicTransport created on first use.
            api_key: Model credential; empty means offline (default: settings.anthropic_api_key)
            registry: Agent registry (default: all standard agents over `store`)
        """
        self.store = store or get_store()
        self.api_key = settings.anthropic_api_key if api_key is None else api_key
        self._transport = transport
        self.registry = registry or AgentRegistry(self.store)

    @property
    def transport(self):
        if self._transport is None:
            self._transport = AnthropicTransport(api_key=self.api_key)
        return self._transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def respond(
        self,
        message: str,
        history: Optional[List[str]] = None,
        image: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ) -> ReplyEnvelope:
        """
        Produce the reply for one user turn.

        Args:
            message: Current user message
            history: Prior turns as "<sender>: <text>" lines
            image: Optional base64 image (data URL or bare)
            context: Request context; gathered from the store when omitted

        Returns:
            ReplyEnvelope (never raises)
        """
        if not self.is_configured:
            return ReplyEnvelope.offline()

        try:
            if context is None:
                context = await self.build_context()

            system_instruction = build_system_instruction(context)
            raw_text = await self.transport.complete(
                system_instruction, build_messages(message, history, image)
            )

            intent = self.interpret(raw_text)
            return await self.execute(intent)

        except Exception as e:
            logger.error(f"Error processing message: {str(e)}", exc_info=True)
            return ReplyEnvelope.processing_error()

    async def build_context(self) -> RequestContext:
        """Read the current time, stored events and user name."""
        events = await self.store.get_events()
        user = await self.store.get_user_context()
        return RequestContext(
            now=datetime.now().astimezone(),
            events=events,
            user_name=user.name or "User",
        )

    @staticmethod
    def interpret(raw_text: str) -> Intent:
        """
        Parse raw model text into an Intent.

        Raises:
            json.JSONDecodeError: If no JSON object can be parsed
            pydantic.ValidationError: If the JSON is not an object
        """
        try:
            data = parse_json_object(raw_text)
        except ValueError:
            logger.warning(f"Unparseable model output: {raw_text[:200]!r}")
            raise
        return Intent.model_validate(data)

    async def execute(self, intent: Intent) -> ReplyEnvelope:
        """Run the intent's command (if any) and assemble the envelope."""
        text = intent.response
        payload = None
        payload_kind = None

        if intent.wants_tool:
            result = await self.registry.dispatch(
                intent.active_agent, intent.command, intent.parameters or {}
            )

            if result.success:
                payload = result.data
                payload_kind = result.payload_kind
                if result.message:
                    text = f"{text}\n\n{result.message}" if text else result.message
            else:
                text = f"{text} (System: {result.message})".lstrip()

        return ReplyEnvelope(
            text=text or "Processed.",
            tone=intent.detected_tone or "Neutral",
            language=intent.detected_language or "en",
            agent=intent.active_agent,
            payload=payload,
            payload_kind=payload_kind,
        )


_orchestrator: Optional[ResponseOrchestrator] = None


def get_orchestrator() -> ResponseOrchestrator:
    """Process-wide orchestrator bound to settings."""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = ResponseOrchestrator()
    return _orchestrator
