"""Pydantic models for the surrogate agent."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class AgentType(str, Enum):
    """Agents the assistant can route a request to."""

    CHAT = "Chat Agent"
    SCHEDULE = "Schedule Agent"
    DOCS = "Docs Agent"
    SEARCH = "Search Agent"
    EMAIL = "Email Agent"
    PAYMENT = "Payment Agent"
    FINANCE = "Financial Agent"

    @classmethod
    def from_label(cls, value: Any) -> "AgentType":
        """
        Resolve a model-supplied agent label.

        Accepts the wire value ("Schedule Agent"), the member name
        ("SCHEDULE") or the bare label ("Schedule"), case-insensitively.
        Anything unrecognized falls back to CHAT.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.CHAT

        label = value.strip().lower()
        for member in cls:
            bare = member.value.lower().replace(" agent", "")
            if label in (member.value.lower(), member.name.lower(), bare):
                return member
        return cls.CHAT


class PayloadKind(str, Enum):
    """Shape tag for handler payloads. Closed set: adding a kind breaks the envelope contract."""

    EVENT = "EVENT"
    DOC = "DOC"
    SEARCH_RESULT = "SEARCH_RESULT"
    EMAIL = "EMAIL"
    PAYMENT = "PAYMENT"
    FINANCE_REPORT = "FINANCE_REPORT"


class EventStatus(str, Enum):
    """Calendar event lifecycle."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    SUCCESS = "Success"
    FAILED = "Failed"


class Recommendation(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class Sender(str, Enum):
    USER = "user"
    AGENT = "agent"
    SYSTEM = "system"


class WireModel(BaseModel):
    """Base for records stored and returned in camelCase form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Dump to the JSON-compatible camelCase form."""
        return self.model_dump(mode="json", by_alias=True)


# --- Agent records ---


class CalendarEvent(WireModel):
    """Calendar event created by the Schedule agent."""

    id: str
    title: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    description: Optional[str] = ""
    status: EventStatus = EventStatus.PENDING


class TextDocument(WireModel):
    id: str
    title: str
    content: str
    created_at: datetime


class Email(WireModel):
    id: str
    to: str
    subject: str
    body: str
    sent_at: datetime


class PaymentTransaction(WireModel):
    """Simulated payment confirmation. Never mutated after creation."""

    id: str
    amount: float
    currency: str = "USD"
    recipient: str
    description: str = "Payment"
    status: PaymentStatus = PaymentStatus.SUCCESS
    timestamp: datetime


class SearchHit(WireModel):
    title: str
    snippet: str
    source: str


class SearchResult(WireModel):
    query: str
    results: List[SearchHit] = Field(default_factory=list)


class FinancialReport(WireModel):
    """Per-request market view. Not persisted."""

    symbol: str
    price: float
    currency: str = "USD"
    change: float = 0.0
    change_percent: float = 0.0
    market_cap: str = "N/A"
    pe_ratio: Optional[float] = None
    week52_high: float = Field(alias="week52High")
    week52_low: float = Field(alias="week52Low")
    recommendation: Recommendation = Recommendation.HOLD
    analysis: str


# --- Conversation records ---


class ChatMessage(WireModel):
    id: str
    text: str
    sender: Sender
    timestamp: datetime
    tone: Optional[str] = None
    language: Optional[str] = None
    processing_agent: Optional[AgentType] = None
    payload: Optional[Any] = None
    payload_kind: Optional[PayloadKind] = None


class ChatSession(WireModel):
    id: str
    title: str = "New Conversation"
    messages: List[ChatMessage] = Field(default_factory=list)
    last_message: str = ""
    updated_at: datetime


class UserContext(WireModel):
    """User preferences."""

    name: str = "Boss"
    preferred_language: str = "en"  # 'en', 'ur', 'pa'
    has_seen_intro: bool = False
    theme: str = "light"


# --- Interpretation and dispatch ---


class Intent(WireModel):
    """Structured view of a model response."""

    response: str = ""
    detected_tone: Optional[str] = None
    detected_language: Optional[str] = None
    active_agent: AgentType = AgentType.CHAT
    command: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None

    @field_validator("response", mode="before")
    @classmethod
    def coerce_response(cls, v):
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("active_agent", mode="before")
    @classmethod
    def resolve_agent(cls, v):
        """Unknown or missing agent labels fall back to the Chat agent."""
        return AgentType.from_label(v)

    @field_validator("detected_tone", "detected_language", "command", mode="before")
    @classmethod
    def coerce_label(cls, v):
        """Scalars become text, blanks and containers become None."""
        if isinstance(v, (int, float)):
            v = str(v)
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator("parameters", mode="before")
    @classmethod
    def drop_non_mapping_parameters(cls, v):
        return v if isinstance(v, dict) else None

    @property
    def wants_tool(self) -> bool:
        """True when the intent selects a non-chat agent and names a command."""
        return self.active_agent != AgentType.CHAT and self.command is not None


class AgentResult(BaseModel):
    """Uniform result returned by every agent handler."""

    success: bool
    message: str = ""
    data: Optional[Any] = None
    payload_kind: Optional[PayloadKind] = None

    @model_validator(mode="after")
    def failure_has_no_payload(self):
        if not self.success and (self.data is not None or self.payload_kind is not None):
            raise ValueError("A failed AgentResult cannot carry a payload")
        return self

    @classmethod
    def ok(
        cls,
        message: str,
        data: Optional[Any] = None,
        payload_kind: Optional[PayloadKind] = None,
    ) -> "AgentResult":
        return cls(success=True, message=message, data=data, payload_kind=payload_kind)

    @classmethod
    def fail(cls, message: str) -> "AgentResult":
        return cls(success=False, message=message)


class ReplyEnvelope(WireModel):
    """Normalized reply consumed by the rendering layer."""

    text: str
    tone: str = "Neutral"
    language: str = "en"
    agent: AgentType = AgentType.CHAT
    payload: Optional[Any] = None
    payload_kind: Optional[PayloadKind] = None

    @classmethod
    def offline(cls) -> "ReplyEnvelope":
        return cls(
            text="I'm offline. Please check the Anthropic API configuration.",
            tone="Neutral",
            language="en",
            agent=AgentType.CHAT,
        )

    @classmethod
    def processing_error(cls) -> "ReplyEnvelope":
        return cls(
            text="I encountered a processing error. Please try again.",
            tone="Error",
            language="en",
            agent=AgentType.CHAT,
        )


class RequestContext(BaseModel):
    """Side context interpolated into the system instruction for one request."""

    now: datetime
    events: List[CalendarEvent] = Field(default_factory=list)
    user_name: str = "User"

    def events_summary(self) -> str:
        """Compact one-line listing of known events, or 'None'."""
        if not self.events:
            return "None"
        return "; ".join(f"{e.date} {e.time}: {e.title}" for e in self.events)
