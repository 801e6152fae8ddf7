"""Deep links derived from agent records (calendar invites, mail drafts)."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import quote

from surrogate.models.schemas import CalendarEvent

logger = logging.getLogger(__name__)

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
GMAIL_COMPOSE_URL = "https://mail.google.com/mail/"

EVENT_DURATION = timedelta(hours=1)


def encode_component(value: str) -> str:
    """Percent-encode a URL component, keeping the same unreserved set as encodeURIComponent."""
    return quote(value or "", safe="-_.!~*'()")


def _gcal_stamp(moment: datetime) -> str:
    """ISO-8601 basic format in UTC, e.g. 20260118T140000Z."""
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def calendar_invite_url(event: CalendarEvent) -> Optional[str]:
    """
    Build a Google Calendar "add event" link for an event.

    The event's date and time are read as local wall-clock time and the
    invite spans one hour.

    Returns:
        The link, or None if date/time cannot be parsed
    """
    try:
        start = datetime.fromisoformat(f"{event.date}T{event.time}")
    except (TypeError, ValueError) as e:
        logger.error(f"Error generating calendar link for event {event.id}: {e}")
        return None

    end = start + EVENT_DURATION
    return (
        f"{GOOGLE_CALENDAR_URL}?action=TEMPLATE"
        f"&text={encode_component(event.title)}"
        f"&dates={_gcal_stamp(start)}/{_gcal_stamp(end)}"
        f"&details={encode_component(event.description or '')}"
    )


def mailto_link(to: str, subject: str, body: str) -> str:
    """
    Build a mailto: link.

    Body newlines are sent as CRLF (%0D%0A); many mail clients drop bare LF.
    """
    body_crlf = body.replace("\r\n", "\n").replace("\n", "\r\n")
    return f"mailto:{to}?subject={encode_component(subject)}&body={encode_component(body_crlf)}"


def webmail_link(to: str, subject: str, body: str) -> str:
    """Build a Gmail compose URL."""
    return (
        f"{GMAIL_COMPOSE_URL}?view=cm&fs=1"
        f"&to={encode_component(to)}"
        f"&su={encode_component(subject)}"
        f"&body={encode_component(body)}"
    )
