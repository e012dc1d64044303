"""
API Services — Screen State to Response Models

Turns owned session state into the response models each screen
renders. No state is mutated here.
"""

from typing import List

from agentdeck.screens import navigation, overview_snapshot
from agentdeck.session import Session
from agentdeck.state import LogEntry

from .schemas import (
    DataVaultResponse,
    LogEntryResponse,
    NavItem,
    OverviewResponse,
    SessionResponse,
    SessionSnapshotResponse,
    ToolingLogsResponse,
    ValidationResponse,
    WorkflowResponse,
    WorkflowStepResponse,
)


def build_entries(entries: List[LogEntry]) -> List[LogEntryResponse]:
    return [
        LogEntryResponse(
            id=e.id,
            seq=e.seq,
            timestamp=e.timestamp,
            text=e.text,
            display=e.display,
        )
        for e in entries
    ]


def build_session(session: Session) -> SessionResponse:
    return SessionResponse(
        session_id=session.id,
        created_at=session.created_at,
        active_screen=session.active_screen,
        screens=[NavItem(**item) for item in navigation()],
    )


def build_overview() -> OverviewResponse:
    return OverviewResponse(**overview_snapshot())


def build_workflow(session: Session) -> WorkflowResponse:
    board = session.workflow
    steps = board.snapshot()
    return WorkflowResponse(
        status_order=list(board.status_order),
        steps=[WorkflowStepResponse(**step) for step in steps],
    )


def build_tooling(session: Session) -> ToolingLogsResponse:
    entries = session.tooling.logs()
    return ToolingLogsResponse(
        runs=session.tooling.runs,
        count=len(entries),
        entries=build_entries(entries),
        hint=session.tooling.hint(),
    )


def build_validation(session: Session) -> ValidationResponse:
    loop = session.validation
    last_run = loop.last_run
    return ValidationResponse(
        status=loop.status,
        last_run=last_run,
        last_run_label=last_run.strftime("%H:%M:%S") if last_run else "—",
        history=build_entries(loop.history.all()),
    )


def build_datavault(session: Session) -> DataVaultResponse:
    vault = session.datavault
    return DataVaultResponse(
        snapshots=vault.snapshots,
        memory_gb=vault.memory_gb,
        memory_label=f"{vault.memory_gb:g} GB",
        last_sync=vault.last_sync,
        last_sync_label=vault.last_sync_label(),
        retention_days=vault.retention_days,
    )


def build_snapshot(session: Session) -> SessionSnapshotResponse:
    base = build_session(session)
    return SessionSnapshotResponse(
        **base.model_dump(),
        overview=build_overview(),
        workflow=build_workflow(session),
        tooling=build_tooling(session),
        validation=build_validation(session),
        datavault=build_datavault(session),
    )
