"""
Base class for all agent handlers.

Provides common functionality:
- Command dispatch over a per-agent command table
- Parameter validation against per-command schemas
- Structured failure results (handlers never raise for bad input)
"""

import logging
from abc import ABC
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

from pydantic import ValidationError

from surrogate.models.agent_schemas import CommandParams
from surrogate.models.schemas import AgentResult, AgentType
from surrogate.services.store import SurrogateStore

logger = logging.getLogger(__name__)


class BaseAgent(ABC):
    """Abstract base class for all agent handlers"""

    agent_type: ClassVar[AgentType]

    # command name -> (parameter schema, name of the coroutine method that runs it)
    COMMANDS: ClassVar[Dict[str, Tuple[Type[CommandParams], str]]] = {}

    # command name -> message shown when its parameters fail validation
    INVALID_MESSAGES: ClassVar[Dict[str, str]] = {}

    UNKNOWN_COMMAND_MESSAGE: ClassVar[str] = "Unknown action."

    def __init__(self, store: SurrogateStore):
        self.store = store
        self.agent_name: str = self.__class__.__name__

    async def handle(self, command: str, parameters: Optional[Dict[str, Any]] = None) -> AgentResult:
        """
        Run one command.

        Args:
            command: Command name chosen by the model (e.g. "create_event")
            parameters: Raw parameter mapping from the model

        Returns:
            AgentResult. Unknown commands and invalid parameters produce a
            failure result; store I/O errors propagate to the caller.
        """
        entry = self.COMMANDS.get(command)
        if entry is None:
            logger.info(f"{self.agent_name}: unknown command '{command}'")
            return AgentResult.fail(self.UNKNOWN_COMMAND_MESSAGE)

        schema, method_name = entry
        params = self._validate(command, schema, parameters or {})
        if isinstance(params, AgentResult):
            return params

        logger.info(f"{self.agent_name}: running '{command}'")
        return await getattr(self, method_name)(params)

    def _validate(
        self,
        command: str,
        schema: Type[CommandParams],
        parameters: Dict[str, Any],
    ) -> Any:
        """Validate parameters, returning the schema instance or a failure result."""
        try:
            return schema.model_validate(parameters)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            logger.info(f"{self.agent_name}: invalid parameters for '{command}': {fields}")
            message = self.INVALID_MESSAGES.get(command) or (
                f"Missing or invalid parameters for {command}: {', '.join(fields)}."
            )
            return AgentResult.fail(message)
