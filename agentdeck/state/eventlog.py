"""
Event Log — Newest-First Batched Activity Records

Core rule: ONE TRIGGER, ONE BATCH.
A single user action (e.g. "Run Toolchain") produces a fixed multi-line
narrative. The whole batch is prepended as one contiguous block so the
newest activity renders first while the lines of a batch keep their
original order:

    append_batch(["step1", "step2"])
    append_batch(["step3"])
    all()  ->  step3, step1, step2

Every line of a batch shares one timestamp. Identity never depends on
the clock: each entry gets a uuid4 id plus a per-log sequence number
that keeps counting across clear().

Entry schema (JSON):
    {
        "id": "9f0c...",                          # uuid4 hex
        "seq": 7,                                 # monotonic per log
        "timestamp": "2026-10-17T12:00:00+00:00", # ISO 8601, UTC
        "text": "Router matched: JS runtime"
    }
"""

import itertools
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Iterable, List, Optional
from uuid import uuid4

from .cycle import InvalidConfiguration

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogEntry:
    """One immutable log record."""
    id: str
    seq: int
    timestamp: datetime
    text: str

    @property
    def display(self) -> str:
        """Render as the console shows it: '[HH:MM:SS] text'."""
        return f"[{self.timestamp.strftime('%H:%M:%S')}] {self.text}"


class EventLog:
    """
    Thread-safe, newest-first event log with optional length cap.

    Args:
        max_entries: Keep at most this many entries (oldest dropped first).
                     None or 0 means unbounded.
        clock: Callable returning a timezone-aware datetime. Defaults to UTC now.
    """

    def __init__(
        self,
        max_entries: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if max_entries is not None and max_entries < 0:
            raise InvalidConfiguration(f"max_entries must be >= 0, got {max_entries}")
        self._max_entries = max_entries or None
        self._clock = clock or _utc_now
        self._entries: List[LogEntry] = []
        self._seq = itertools.count(1)
        self._lock = Lock()

    @property
    def max_entries(self) -> Optional[int]:
        return self._max_entries

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def append_batch(self, lines: Iterable[str]) -> List[LogEntry]:
        """
        Prepend one batch of lines, preserving their order.

        With a cap, the oldest entries (lowest seq) go first. A batch longer
        than the cap keeps only its last `max_entries` lines.

        Returns every entry created for this batch, including any the cap
        dropped (empty for an empty batch).
        """
        lines = list(lines)
        if not lines:
            return []

        ts = self._clock()
        with self._lock:
            batch = [
                LogEntry(id=uuid4().hex, seq=next(self._seq), timestamp=ts, text=line)
                for line in lines
            ]
            dropped = 0
            cap = self._max_entries
            if cap is not None and len(batch) > cap:
                # Batch alone overflows: keep its newest (last) lines only
                dropped = len(self._entries) + len(batch) - cap
                self._entries = batch[-cap:]
            else:
                self._entries[:0] = batch
                if cap is not None and len(self._entries) > cap:
                    dropped = len(self._entries) - cap
                    del self._entries[cap:]

        logger.debug(f"[EventLog] appended batch of {len(batch)} at {ts.isoformat()}")
        if dropped:
            logger.debug(f"[EventLog] cap {self._max_entries} reached, dropped {dropped} oldest")
        return batch

    def all(self) -> List[LogEntry]:
        """Return a copy of the entries, newest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"[EventLog] cleared {count} entries")

    def __len__(self) -> int:
        return len(self._entries)
