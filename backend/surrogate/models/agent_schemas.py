"""
Parameter schemas for agent commands.

Each command validates its parameter bag against one of these models at
the handler boundary. Unknown keys are ignored; numbers are accepted
where text is expected because models occasionally send "time": 9.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from surrogate.utils.normalizer import parse_number


class CommandParams(BaseModel):
    """Base for all command parameter schemas"""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# --- Schedule Agent ---


class CreateEventParams(CommandParams):
    title: str = Field(min_length=1)
    time: str = Field(min_length=1, description="HH:MM, e.g. 14:00")
    date: Optional[str] = Field(None, description="YYYY-MM-DD, defaults to today")
    description: Optional[str] = None


class EventRefParams(CommandParams):
    """Identifies an existing event for confirm_event / cancel_event"""

    id: str = Field(min_length=1)


# --- Docs Agent ---


class CreateDocParams(CommandParams):
    content: str = Field(min_length=1)
    title: str = "Untitled Draft"

    @field_validator("title", mode="before")
    @classmethod
    def default_blank_title(cls, v):
        return v or "Untitled Draft"


# --- Email Agent ---


class SendEmailParams(CommandParams):
    to: str = Field(min_length=1)
    subject: str = Field(min_length=1)
    body: str = Field(min_length=1)


# --- Payment Agent ---


class MakePaymentParams(CommandParams):
    amount: float = Field(gt=0)
    recipient: str = Field(min_length=1)
    currency: str = "USD"
    description: str = "Payment"

    @field_validator("amount", mode="before")
    @classmethod
    def normalize_amount(cls, v):
        if v is None or v == "":
            raise ValueError("amount is required")
        return parse_number(v)

    @field_validator("currency", "description", mode="before")
    @classmethod
    def blank_to_default(cls, v, info):
        if v:
            return v
        return "USD" if info.field_name == "currency" else "Payment"


# --- Financial Agent ---


class AnalyzeStockParams(CommandParams):
    """
    Market data the model found for a symbol.

    Numeric fields stay raw here; the handler runs them through the
    normalizer so "N/A" and "$1,234" are handled in one place.
    """

    symbol: str = Field(min_length=1)
    price: Optional[Any] = None
    change: Optional[Any] = None
    change_percent: Optional[Any] = Field(None, alias="changePercent")
    market_cap: Optional[Any] = Field(None, alias="marketCap")
    pe_ratio: Optional[Any] = Field(None, alias="peRatio")
    week52_high: Optional[Any] = Field(None, alias="week52High")
    week52_low: Optional[Any] = Field(None, alias="week52Low")
    recommendation: Optional[str] = None
    analysis: Optional[str] = None
    currency: Optional[str] = None


# --- Search Agent ---


class WebSearchParams(CommandParams):
    query: str = "Unknown"

    @field_validator("query", mode="before")
    @classmethod
    def default_blank_query(cls, v):
        return v or "Unknown"
