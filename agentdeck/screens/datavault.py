"""
DataVault — Snapshot & Memory Counters

Pure counters: storing a snapshot bumps the count and the offloaded
memory, purging zeroes both. No data is stored anywhere.
"""

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DataVault:
    """Mock external context store."""

    def __init__(
        self,
        snapshots: int = 12,
        memory_gb: float = 1.8,
        snapshot_size_gb: float = 0.2,
        retention_days: int = 30,
        initial_sync_label: str = "2 min ago",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.snapshots = snapshots
        self.memory_gb = memory_gb
        self.snapshot_size_gb = snapshot_size_gb
        self.retention_days = retention_days
        self.initial_sync_label = initial_sync_label
        self.last_sync: Optional[datetime] = None
        self._clock = clock or _utc_now
        self._lock = Lock()

    def store_snapshot(self) -> int:
        """Record one snapshot. Returns the new snapshot count."""
        with self._lock:
            self.snapshots += 1
            # Keep one decimal so repeated adds don't drift (1.8 + 0.2 != 2.0)
            self.memory_gb = round(self.memory_gb + self.snapshot_size_gb, 1)
            self.last_sync = self._clock()
            count = self.snapshots
        logger.info(f"[DataVault] snapshot stored (count={count}, memory={self.memory_gb} GB)")
        return count

    def purge(self) -> None:
        with self._lock:
            self.snapshots = 0
            self.memory_gb = 0.0
            self.last_sync = self._clock()
        logger.info("[DataVault] purged all snapshots")

    def last_sync_label(self, now: Optional[datetime] = None) -> str:
        """
        Human label for the last sync.

        Never synced -> configured initial label; under a minute -> "Just now";
        otherwise "N min ago".
        """
        if self.last_sync is None:
            return self.initial_sync_label
        now = now or self._clock()
        minutes = int((now - self.last_sync).total_seconds() // 60)
        if minutes < 1:
            return "Just now"
        return f"{minutes} min ago"
