"""
Workflow Board — Per-Step Status Cycling

Each workflow step owns its own StatusCycle. Tapping a step advances
only that step; the other steps are untouched.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from agentdeck.state import StatusCycle

logger = logging.getLogger(__name__)


class UnknownStep(LookupError):
    """Raised when a step id is not part of the workflow."""


@dataclass(frozen=True)
class WorkflowStep:
    id: str
    title: str
    note: str


WORKFLOW_STEPS = (
    WorkflowStep("parse", "Parse Intent", "Extract constraints + deliverables."),
    WorkflowStep("plan", "Plan Goals", "Break into atomic tasks."),
    WorkflowStep("route", "Select Tools", "Match tasks to tools."),
    WorkflowStep("execute", "Execute + Verify", "Run tools + validate outputs."),
)


class WorkflowBoard:
    """Workflow steps with one status cycle each."""

    def __init__(
        self,
        status_order: Sequence[str],
        steps: Sequence[WorkflowStep] = WORKFLOW_STEPS,
    ):
        self._steps = tuple(steps)
        self._status_order = tuple(status_order)
        self._cycles: Dict[str, StatusCycle] = {
            step.id: StatusCycle(self._status_order) for step in self._steps
        }

    @property
    def status_order(self) -> Tuple[str, ...]:
        return self._status_order

    def advance(self, step_id: str) -> str:
        """Advance one step's status. Returns the new status label."""
        cycle = self._cycles.get(step_id)
        if cycle is None:
            raise UnknownStep(f"Unknown workflow step: {step_id!r}")
        label = cycle.advance()
        logger.info(f"[Workflow] {step_id} -> {label}")
        return label

    def status(self, step_id: str) -> str:
        cycle = self._cycles.get(step_id)
        if cycle is None:
            raise UnknownStep(f"Unknown workflow step: {step_id!r}")
        return cycle.current_label()

    def snapshot(self) -> List[dict]:
        """Steps in display order with their current status."""
        return [
            {
                "id": step.id,
                "title": step.title,
                "note": step.note,
                "status": self._cycles[step.id].current_label(),
            }
            for step in self._steps
        ]
