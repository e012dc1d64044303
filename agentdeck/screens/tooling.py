"""
Toolchain — Mock Tool Runs

A run produces the fixed three-line narrative below as ONE batch in the
execution log. Nothing is actually routed or executed.
"""

import logging
from threading import Lock
from typing import List, Optional

from agentdeck.state import EventLog, LogEntry

logger = logging.getLogger(__name__)


TOOLCHAIN_RUN_LINES = (
    "Router matched: JS runtime",
    "Executed tool: WebView eval",
    "Stored output to DataVault",
)

EMPTY_LOG_HINT = "No runs yet. Tap “Run Toolchain”."
CLEARED_LOG_HINT = "Log cleared. Tap “Run Toolchain” to log a new run."


class Toolchain:
    """Execution log plus a run counter."""

    def __init__(self, max_entries: Optional[int] = None, clock=None):
        self.log = EventLog(max_entries=max_entries, clock=clock)
        self._runs = 0
        self._lock = Lock()

    @property
    def runs(self) -> int:
        return self._runs

    def run(self) -> List[LogEntry]:
        """Record one mock run. Returns the entries of the new batch."""
        with self._lock:
            self._runs += 1
            run_no = self._runs
        batch = self.log.append_batch(TOOLCHAIN_RUN_LINES)
        logger.info(f"[Toolchain] run #{run_no} logged {len(batch)} lines")
        return batch

    def logs(self) -> List[LogEntry]:
        return self.log.all()

    def clear(self) -> None:
        self.log.clear()

    def hint(self) -> Optional[str]:
        """Placeholder text for an empty log, or None when there is something to show."""
        if len(self.log):
            return None
        return EMPTY_LOG_HINT if self._runs == 0 else CLEARED_LOG_HINT
