"""
Status Cycle — Fixed-Order Status Rotation

A StatusCycle holds one discrete status that moves through a fixed,
ordered set of labels on each trigger and wraps back to the first
label after the last one:

    Pending → Running → Done → Pending → ...

The label set is frozen at construction. The position only moves
through `advance()`, which is atomic under the cycle's own lock so two
concurrent triggers never collapse into a single step.
"""

import logging
from threading import Lock
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a state component is constructed with unusable settings."""


class StatusCycle:
    """
    Thread-safe cyclic status tracker.

    Usage:
        cycle = StatusCycle(["Pending", "Running", "Done"])
        cycle.advance()        # "Running"
        cycle.current_label()  # "Running"
    """

    __slots__ = ("_states", "_current", "_lock")

    def __init__(self, states: Iterable[str]):
        states = tuple(states)
        if not states:
            raise InvalidConfiguration("StatusCycle requires at least one state")
        self._states: Tuple[str, ...] = states
        self._current: int = 0
        self._lock = Lock()

    @property
    def states(self) -> Tuple[str, ...]:
        return self._states

    @property
    def current(self) -> int:
        """Index of the current label, always in [0, len(states))."""
        return self._current

    def advance(self) -> str:
        """Move to the next state, wrapping at the end. Returns the new label."""
        with self._lock:
            index = (self._current + 1) % len(self._states)
            self._current = index
            label = self._states[index]
        logger.debug(f"[StatusCycle] advanced to {label!r} ({index}/{len(self._states)})")
        return label

    def current_label(self) -> str:
        return self._states[self._current]

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"StatusCycle(states={list(self._states)!r}, current={self.current_label()!r})"
