"""
API Tests — Console Session Endpoint Tests

Tests cover:
- Session lifecycle (create / snapshot / delete / 404)
- Screen selection and validation (422)
- Workflow step cycling
- Tooling run batches, newest-first ordering, clear
- Validation toggling
- DataVault counters
- Health endpoints
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from agentdeck.api.main import create_app
from agentdeck.config import Settings


FIXED_TS = datetime(2026, 10, 17, 8, 30, 15, tzinfo=timezone.utc)


@pytest.fixture
def client():
    """Fresh app (and SessionStore) per test."""
    app = create_app(Settings(), clock=lambda: FIXED_TS)
    return TestClient(app)


@pytest.fixture
def session_url(client):
    response = client.post("/sessions")
    assert response.status_code == 201
    return f"/sessions/{response.json()['session_id']}"


class TestSessions:

    def test_create_session(self, client):
        response = client.post("/sessions")

        assert response.status_code == 201
        data = response.json()
        assert data["active_screen"] == "overview"
        assert data["created_at"].startswith("2026-10-17T08:30:15")
        assert [s["key"] for s in data["screens"]] == [
            "overview", "workflow", "tooling", "validation", "datavault",
        ]

    def test_snapshot_contains_every_screen(self, client, session_url):
        response = client.get(session_url)

        assert response.status_code == 200
        data = response.json()
        for key in ("overview", "workflow", "tooling", "validation", "datavault"):
            assert key in data
        assert data["tooling"]["hint"] == "No runs yet. Tap “Run Toolchain”."

    def test_unknown_session_returns_404(self, client):
        assert client.get("/sessions/does-not-exist").status_code == 404
        assert client.post("/sessions/does-not-exist/tooling/run").status_code == 404

    def test_delete_session(self, client, session_url):
        assert client.delete(session_url).status_code == 204
        assert client.get(session_url).status_code == 404
        assert client.delete(session_url).status_code == 404

    def test_apps_do_not_share_sessions(self, session_url):
        other = TestClient(create_app(Settings()))

        assert other.get(session_url).status_code == 404


class TestScreenSelection:

    def test_select_screen(self, client, session_url):
        response = client.put(f"{session_url}/screen", json={"screen": "Validation"})

        assert response.status_code == 200
        assert response.json()["active_screen"] == "validation"

    def test_unknown_screen_returns_422(self, client, session_url):
        response = client.put(f"{session_url}/screen", json={"screen": "settings"})

        assert response.status_code == 422

    def test_missing_screen_returns_422(self, client, session_url):
        response = client.put(f"{session_url}/screen", json={})

        assert response.status_code == 422


class TestWorkflow:

    def test_advance_cycles_and_wraps(self, client, session_url):
        url = f"{session_url}/workflow/parse/advance"

        statuses = [client.post(url).json()["status"] for _ in range(3)]

        assert statuses == ["Running", "Done", "Pending"]

    def test_workflow_view(self, client, session_url):
        client.post(f"{session_url}/workflow/route/advance")

        data = client.get(f"{session_url}/workflow").json()

        assert data["status_order"] == ["Pending", "Running", "Done"]
        by_id = {s["id"]: s["status"] for s in data["steps"]}
        assert by_id == {"parse": "Pending", "plan": "Pending", "route": "Running", "execute": "Pending"}

    def test_unknown_step_returns_404(self, client, session_url):
        response = client.post(f"{session_url}/workflow/deploy/advance")

        assert response.status_code == 404


class TestTooling:

    def test_run_returns_batch(self, client, session_url):
        data = client.post(f"{session_url}/tooling/run").json()

        assert data["runs"] == 1
        assert [e["display"] for e in data["batch"]] == [
            "[08:30:15] Router matched: JS runtime",
            "[08:30:15] Executed tool: WebView eval",
            "[08:30:15] Stored output to DataVault",
        ]

    def test_logs_newest_batch_first(self, client, session_url):
        first = client.post(f"{session_url}/tooling/run").json()["batch"]
        second = client.post(f"{session_url}/tooling/run").json()["batch"]

        data = client.get(f"{session_url}/tooling/logs").json()

        assert data["count"] == 6
        assert data["hint"] is None
        assert [e["id"] for e in data["entries"]] == [e["id"] for e in second + first]
        assert len({e["id"] for e in data["entries"]}) == 6

    def test_clear_logs(self, client, session_url):
        client.post(f"{session_url}/tooling/run")

        data = client.delete(f"{session_url}/tooling/logs").json()

        assert data["count"] == 0
        assert data["entries"] == []
        assert data["runs"] == 1
        assert data["hint"] == "Log cleared. Tap “Run Toolchain” to log a new run."


class TestValidation:

    def test_initial_state(self, client, session_url):
        data = client.get(f"{session_url}/validation").json()

        assert data["status"] == "Passed"
        assert data["last_run"] is None
        assert data["last_run_label"] == "—"

    def test_each_run_flips(self, client, session_url):
        url = f"{session_url}/validation/run"

        first = client.post(url).json()
        second = client.post(url).json()

        assert first["status"] == "Failed"
        assert first["last_run_label"] == "08:30:15"
        assert second["status"] == "Passed"
        assert [e["text"] for e in second["history"]] == ["Validation Passed", "Validation Failed"]


class TestDataVault:

    def test_initial_counters(self, client, session_url):
        data = client.get(f"{session_url}/datavault").json()

        assert data["snapshots"] == 12
        assert data["memory_label"] == "1.8 GB"
        assert data["last_sync_label"] == "2 min ago"
        assert data["retention_days"] == 30

    def test_store_snapshot(self, client, session_url):
        data = client.post(f"{session_url}/datavault/snapshots").json()

        assert data["snapshots"] == 13
        assert data["memory_gb"] == 2.0
        assert data["memory_label"] == "2 GB"
        assert data["last_sync_label"] == "Just now"

    def test_purge(self, client, session_url):
        data = client.post(f"{session_url}/datavault/purge").json()

        assert data["snapshots"] == 0
        assert data["memory_gb"] == 0.0
        assert data["memory_label"] == "0 GB"


class TestHealthEndpoints:

    def test_ping(self, client):
        assert client.get("/ping").json() == {"status": "ok"}

    def test_health_counts_sessions(self, client, session_url):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["sessions"] == 1

    def test_overview(self, client, session_url):
        data = client.get(f"{session_url}/overview").json()

        assert data["metrics"][1]["value"] == "9"
