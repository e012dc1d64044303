"""
Session Store — Explicitly Owned Console State

Every client session owns its own screen state. There are no
module-level state singletons: the store is created by the application
factory and handed to routes through dependency injection, so two apps
(or two tests) never share counters or logs.

The store keeps at most MAX_SESSIONS sessions. When full, the oldest
session is evicted to make room for a new one.
"""

import logging
from collections import OrderedDict
from datetime import datetime, timezone
from threading import Lock
from typing import Optional
from uuid import uuid4

from agentdeck.config import Settings, settings as default_settings
from agentdeck.screens import (
    DEFAULT_SCREEN,
    DataVault,
    Toolchain,
    ValidationLoop,
    WorkflowBoard,
    resolve_screen,
)
from agentdeck.state import InvalidConfiguration

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionNotFound(LookupError):
    """Raised when a session id is unknown (never created, deleted or evicted)."""


class Session:
    """All screen state for one client."""

    def __init__(self, session_id: str, config: Settings, clock=None):
        self.id = session_id
        self.created_at = (clock or _utc_now)()
        self.active_screen = DEFAULT_SCREEN
        self.workflow = WorkflowBoard(config.STATUS_ORDER)
        self.tooling = Toolchain(max_entries=config.TOOL_LOG_MAX_ENTRIES, clock=clock)
        self.validation = ValidationLoop(
            config.VERDICT_ORDER,
            history_max_entries=config.VALIDATION_HISTORY_MAX_ENTRIES,
            clock=clock,
        )
        self.datavault = DataVault(
            snapshots=config.DATAVAULT_INITIAL_SNAPSHOTS,
            memory_gb=config.DATAVAULT_INITIAL_MEMORY_GB,
            snapshot_size_gb=config.DATAVAULT_SNAPSHOT_SIZE_GB,
            retention_days=config.DATAVAULT_RETENTION_DAYS,
            initial_sync_label=config.DATAVAULT_INITIAL_SYNC_LABEL,
            clock=clock,
        )

    def select_screen(self, key: str) -> str:
        self.active_screen = resolve_screen(key)
        return self.active_screen


class SessionStore:
    """
    Thread-safe map of session id -> Session.

    Usage:
        store = SessionStore()
        session = store.create()
        store.get(session.id).workflow.advance("parse")
    """

    def __init__(self, config: Optional[Settings] = None, clock=None):
        self._config = config or default_settings
        if self._config.MAX_SESSIONS < 1:
            raise InvalidConfiguration(
                f"MAX_SESSIONS must be >= 1, got {self._config.MAX_SESSIONS}"
            )
        self._clock = clock
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()
        self._lock = Lock()
        logger.info(f"[SessionStore] Initialized (max_sessions={self._config.MAX_SESSIONS})")

    def create(self) -> Session:
        # Build outside the lock: a bad cycle order raises before we touch the map
        session = Session(uuid4().hex, self._config, clock=self._clock)
        with self._lock:
            while len(self._sessions) >= self._config.MAX_SESSIONS:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.warning(f"[SessionStore] capacity reached, evicted session {evicted_id}")
            self._sessions[session.id] = session
        logger.info(f"[SessionStore] created session {session.id}")
        return session

    def get(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(f"Unknown session: {session_id}")
        return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFound(f"Unknown session: {session_id}")
        logger.info(f"[SessionStore] deleted session {session_id}")

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
