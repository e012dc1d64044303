"""
Validation Loop — Two-State Verdict Toggle

The verdict is a two-label StatusCycle (Passed ↔ Failed by default):
every run flips it. Each run is also written to a bounded history log.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence

from agentdeck.state import EventLog, StatusCycle

logger = logging.getLogger(__name__)


class ValidationLoop:
    """Simulated verification loop."""

    def __init__(
        self,
        verdict_order: Sequence[str],
        history_max_entries: Optional[int] = None,
        clock=None,
    ):
        self.verdict = StatusCycle(verdict_order)
        self.history = EventLog(max_entries=history_max_entries, clock=clock)
        self.last_run: Optional[datetime] = None

    def run(self) -> str:
        """Flip the verdict and stamp the run. Returns the new verdict."""
        label = self.verdict.advance()
        entry = self.history.append_batch([f"Validation {label}"])[0]
        self.last_run = entry.timestamp
        logger.info(f"[Validation] run -> {label}")
        return label

    @property
    def status(self) -> str:
        return self.verdict.current_label()
