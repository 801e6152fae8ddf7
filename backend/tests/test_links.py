"""Unit tests for calendar and mail deep links."""

from datetime import datetime, timezone
from urllib.parse import parse_qs, urlparse

from surrogate.models.schemas import CalendarEvent
from surrogate.utils.links import calendar_invite_url, encode_component, mailto_link, webmail_link


def test_encode_component_keeps_unreserved_marks():
    """Test percent-encoding of reserved and unreserved characters."""
    assert encode_component("a b&c/d?e") == "a%20b%26c%2Fd%3Fe"
    assert encode_component("it's(fine)!*~-_.") == "it's(fine)!*~-_."
    assert encode_component(None) == ""


def test_calendar_invite_spans_one_hour():
    """Test the invite fields and its one-hour UTC window."""
    event = CalendarEvent(id="1", title="Team Sync", date="2026-01-18", time="14:00", description="Weekly")

    url = calendar_invite_url(event)
    query = parse_qs(urlparse(url).query)

    start = datetime(2026, 1, 18, 14, 0).astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    end = datetime(2026, 1, 18, 15, 0).astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")

    assert url.startswith("https://calendar.google.com/calendar/render?action=TEMPLATE")
    assert query["text"] == ["Team Sync"]
    assert query["details"] == ["Weekly"]
    assert query["dates"] == [f"{start}/{end}"]


def test_calendar_invite_unparseable_time():
    """Test that free-text dates give no invite link."""
    event = CalendarEvent(id="1", title="Lunch", date="tomorrow", time="noon")
    assert calendar_invite_url(event) is None


def test_mailto_link_converts_newlines_to_crlf():
    """Test that LF and CRLF bodies both encode as CRLF."""
    link = mailto_link("ana@example.com", "Hello there", "Line 1\nLine 2\r\nLine 3")
    assert link == "mailto:ana@example.com?subject=Hello%20there&body=Line%201%0D%0ALine%202%0D%0ALine%203"


def test_webmail_link():
    """Test the Gmail compose URL."""
    link = webmail_link("ana@example.com", "Hi", "See you")
    assert link == (
        "https://mail.google.com/mail/?view=cm&fs=1"
        "&to=ana%40example.com&su=Hi&body=See%20you"
    )
