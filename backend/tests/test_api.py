"""
HTTP-level tests for the FastAPI routes.

The store points at a temporary directory and the orchestrator's
transport is an AsyncMock, so no model is called.
"""

import pytest
from fastapi.testclient import TestClient

from surrogate.api.dependencies import orchestrator_dependency, store_dependency
from surrogate.main import app
from surrogate.services.response_orchestrator import ResponseOrchestrator

pytestmark = pytest.mark.integration


@pytest.fixture
def client(store, transport):
    orchestrator = ResponseOrchestrator(store=store, transport=transport, api_key="test-key")
    app.dependency_overrides[store_dependency] = lambda: store
    app.dependency_overrides[orchestrator_dependency] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    """Test the health endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAssistant:
    """Test the stateless respond endpoint."""

    def test_respond_runs_command(self, client, transport, model_reply):
        """Test that a respond call runs the payment command and records it."""
        transport.complete.return_value = model_reply(
            activeAgent="Payment Agent",
            command="make_payment",
            parameters={"amount": "25", "recipient": "Al Noor Hotel"},
        )

        response = client.post("/api/v1/assistant/respond", json={"message": "Pay Al Noor Hotel $25"})

        assert response.status_code == 200
        body = response.json()
        assert body["agent"] == "Payment Agent"
        assert body["payloadKind"] == "PAYMENT"
        assert body["payload"]["recipient"] == "Al Noor Hotel"
        assert "Sent $25.00 USD to Al Noor Hotel" in body["text"]

        payments = client.get("/api/v1/payments").json()
        assert payments[0]["amount"] == 25.0

    def test_respond_requires_message(self, client):
        """Test that a blank request is rejected."""
        response = client.post("/api/v1/assistant/respond", json={"message": "  "})
        assert response.status_code == 400

    def test_processing_error_is_a_normal_reply(self, client, transport):
        """Test that processing errors come back as a normal reply."""
        transport.complete.return_value = "not json"

        response = client.post("/api/v1/assistant/respond", json={"message": "hi"})

        assert response.status_code == 200
        assert response.json()["tone"] == "Error"


class TestChats:
    """Test chat session endpoints."""

    def test_session_lifecycle(self, client, transport, model_reply):
        """Test creating, messaging, listing and deleting a session."""
        transport.complete.return_value = model_reply(response="Hello Boss")

        created = client.post("/api/v1/chats")
        assert created.status_code == 201
        session_id = created.json()["id"]

        sent = client.post(f"/api/v1/chats/{session_id}/messages", json={"text": "Hi there"})
        assert sent.status_code == 200
        assert sent.json()["reply"]["text"] == "Hello Boss"
        assert sent.json()["session"]["title"] == "Hi there"
        assert sent.json()["session"]["lastMessage"] == "Hello Boss"

        listed = client.get("/api/v1/chats").json()
        assert [s["id"] for s in listed] == [session_id]

        assert client.delete(f"/api/v1/chats/{session_id}").status_code == 200
        assert client.get(f"/api/v1/chats/{session_id}").status_code == 404

    def test_message_to_unknown_session(self, client):
        """Test messaging an unknown session."""
        response = client.post("/api/v1/chats/missing/messages", json={"text": "hi"})
        assert response.status_code == 404

    def test_empty_message_rejected(self, client):
        """Test that an empty message is rejected."""
        session_id = client.post("/api/v1/chats").json()["id"]
        response = client.post(f"/api/v1/chats/{session_id}/messages", json={"text": ""})
        assert response.status_code == 400


class TestEvents:
    """Test event status endpoints."""

    def _create_event(self, client, transport, model_reply):
        transport.complete.return_value = model_reply(
            activeAgent="Schedule Agent",
            command="create_event",
            parameters={"title": "Dentist", "time": "10:00", "date": "2026-02-02"},
        )
        return client.post("/api/v1/assistant/respond", json={"message": "Dentist at 10"}).json()["payload"]["id"]

    def test_confirm_cancel_delete(self, client, transport, model_reply):
        """Test confirming, cancelling and deleting an event over HTTP."""
        event_id = self._create_event(client, transport, model_reply)

        confirmed = client.post(f"/api/v1/events/{event_id}/confirm")
        assert confirmed.json()["status"] == "confirmed"
        assert confirmed.json()["calendarUrl"].startswith("https://calendar.google.com")

        cancelled = client.post(f"/api/v1/events/{event_id}/cancel")
        assert cancelled.json()["status"] == "cancelled"
        assert [e["id"] for e in client.get("/api/v1/events").json()] == [event_id]

        assert client.delete(f"/api/v1/events/{event_id}").status_code == 200
        assert client.get("/api/v1/events").json() == []

    def test_unknown_event(self, client):
        """Test event endpoints with an unknown id."""
        assert client.post("/api/v1/events/nope/confirm").status_code == 404
        assert client.post("/api/v1/events/nope/cancel").status_code == 404
        assert client.delete("/api/v1/events/nope").status_code == 404


class TestRecords:
    """Test settings and data reset endpoints."""

    def test_settings_round_trip_and_reset(self, client):
        """Test saving settings and resetting all data."""
        assert client.get("/api/v1/settings").json()["name"] == "Boss"

        saved = client.put("/api/v1/settings", json={"name": "Ayesha", "preferredLanguage": "ur"})
        assert saved.status_code == 200
        assert saved.json()["preferredLanguage"] == "ur"
        assert client.get("/api/v1/settings").json()["name"] == "Ayesha"

        assert client.delete("/api/v1/data").status_code == 200
        assert client.get("/api/v1/settings").json()["name"] == "Boss"
