"""
State Module — Reusable UI State Primitives

Public API:
- StatusCycle: Fixed-order status rotation
- EventLog: Newest-first batched activity log
- LogEntry: Immutable log record
- InvalidConfiguration: Raised for unusable construction arguments
"""

from .cycle import StatusCycle, InvalidConfiguration
from .eventlog import EventLog, LogEntry

__all__ = [
    "StatusCycle",
    "InvalidConfiguration",
    "EventLog",
    "LogEntry",
]
