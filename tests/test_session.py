"""
Session Store Tests

Tests verify:
- Sessions own independent state
- Lookup and deletion of unknown sessions fail with SessionNotFound
- Capacity eviction drops the oldest session
- Settings flow into every screen
"""

from datetime import datetime, timezone

import pytest

from agentdeck.config import Settings
from agentdeck.screens import UnknownScreen
from agentdeck.session import SessionNotFound, SessionStore
from agentdeck.state import InvalidConfiguration


def make_settings(**overrides) -> Settings:
    return Settings(**overrides)


class TestSessionIsolation:

    def test_sessions_do_not_share_state(self):
        store = SessionStore(make_settings())
        a = store.create()
        b = store.create()

        a.workflow.advance("parse")
        a.tooling.run()
        a.validation.run()

        assert b.workflow.status("parse") == "Pending"
        assert b.tooling.logs() == []
        assert b.validation.status == "Passed"

    def test_separate_stores_are_independent(self):
        """Two stores (e.g. two apps) never see each other's sessions."""
        first = SessionStore(make_settings())
        second = SessionStore(make_settings())

        session = first.create()

        assert session.id in first
        assert session.id not in second

    def test_created_at_uses_store_clock(self):
        ts = datetime(2026, 10, 17, 7, 0, tzinfo=timezone.utc)
        store = SessionStore(make_settings(), clock=lambda: ts)

        assert store.create().created_at == ts


class TestLookup:

    def test_get_returns_same_session(self):
        store = SessionStore(make_settings())
        session = store.create()

        assert store.get(session.id) is session

    def test_get_unknown_raises(self):
        store = SessionStore(make_settings())

        with pytest.raises(SessionNotFound):
            store.get("missing")

    def test_delete(self):
        store = SessionStore(make_settings())
        session = store.create()

        store.delete(session.id)

        assert len(store) == 0
        with pytest.raises(SessionNotFound):
            store.delete(session.id)


class TestCapacity:

    def test_oldest_session_evicted(self):
        store = SessionStore(make_settings(MAX_SESSIONS=2))
        first = store.create()
        second = store.create()

        third = store.create()

        assert len(store) == 2
        assert first.id not in store
        assert second.id in store and third.id in store

    def test_zero_capacity_rejected(self):
        with pytest.raises(InvalidConfiguration):
            SessionStore(make_settings(MAX_SESSIONS=0))


class TestSettingsFlow:

    def test_custom_orders(self):
        store = SessionStore(make_settings(
            STATUS_ORDER=["Todo", "Doing"],
            VERDICT_ORDER=["Green", "Amber", "Red"],
        ))
        session = store.create()

        assert session.workflow.advance("route") == "Doing"
        assert session.validation.run() == "Amber"

    def test_empty_status_order_fails_on_create(self):
        store = SessionStore(make_settings(STATUS_ORDER=[]))

        with pytest.raises(InvalidConfiguration):
            store.create()
        assert len(store) == 0

    def test_datavault_defaults(self):
        session = SessionStore(make_settings(DATAVAULT_INITIAL_SNAPSHOTS=3)).create()

        assert session.datavault.snapshots == 3
        assert session.datavault.memory_gb == 1.8

    def test_select_screen(self):
        session = SessionStore(make_settings()).create()

        assert session.active_screen == "overview"
        assert session.select_screen("tooling") == "tooling"
        with pytest.raises(UnknownScreen):
            session.select_screen("nope")
