"""
Screens Module — Per-Screen State for the Console

Public API:
- WorkflowBoard: Step status cycling
- Toolchain: Mock tool runs with execution log
- ValidationLoop: Pass/fail verdict toggle
- DataVault: Snapshot and memory counters
- Overview helpers and the screen registry
"""

from .workflow import WorkflowBoard, WorkflowStep, WORKFLOW_STEPS, UnknownStep
from .tooling import Toolchain, TOOLCHAIN_RUN_LINES, EMPTY_LOG_HINT, CLEARED_LOG_HINT
from .validation import ValidationLoop
from .datavault import DataVault
from .overview import (
    SCREEN_LABELS,
    DEFAULT_SCREEN,
    UnknownScreen,
    resolve_screen,
    overview_snapshot,
    navigation,
)

__all__ = [
    "WorkflowBoard",
    "WorkflowStep",
    "WORKFLOW_STEPS",
    "UnknownStep",
    "Toolchain",
    "TOOLCHAIN_RUN_LINES",
    "EMPTY_LOG_HINT",
    "CLEARED_LOG_HINT",
    "ValidationLoop",
    "DataVault",
    "SCREEN_LABELS",
    "DEFAULT_SCREEN",
    "UnknownScreen",
    "resolve_screen",
    "overview_snapshot",
    "navigation",
]
