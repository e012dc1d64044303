"""
API Routes — Endpoint Definitions

Every mutating endpoint is one trigger: it performs exactly one state
change on the caller's session and returns the re-rendered state.

All handlers are async. Domain lookup errors become 404s; the session
store is injected from the application state.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from agentdeck.screens import UnknownStep
from agentdeck.session import Session, SessionNotFound, SessionStore

from .schemas import (
    DataVaultResponse,
    OverviewResponse,
    ScreenSelectRequest,
    SessionResponse,
    SessionSnapshotResponse,
    StepAdvanceResponse,
    ToolingLogsResponse,
    ToolingRunResponse,
    ValidationResponse,
    WorkflowResponse,
)
from .services import (
    build_datavault,
    build_entries,
    build_overview,
    build_session,
    build_snapshot,
    build_tooling,
    build_validation,
    build_workflow,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions")


# Dependency for the session store
def get_session_store(request: Request) -> SessionStore:
    """Provide the store owned by the running application."""
    return request.app.state.sessions


def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> Session:
    try:
        return store.get(session_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# =============================================================================
# SESSIONS
# =============================================================================

@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Sessions"],
    summary="Create a console session",
)
async def create_session(store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    session = store.create()
    return build_session(session)


@router.get(
    "/{session_id}",
    response_model=SessionSnapshotResponse,
    tags=["Sessions"],
    summary="Full state of every screen",
)
async def get_session_snapshot(session: Session = Depends(get_session)) -> SessionSnapshotResponse:
    return build_snapshot(session)


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Sessions"],
    summary="Drop a session and all its state",
)
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    try:
        store.delete(session_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{session_id}/screen",
    response_model=SessionResponse,
    tags=["Sessions"],
    summary="Select the active screen",
)
async def select_screen(
    request: ScreenSelectRequest,
    session: Session = Depends(get_session),
) -> SessionResponse:
    # Unknown keys are already rejected with a 422 by ScreenSelectRequest
    session.select_screen(request.screen)
    return build_session(session)


# =============================================================================
# OVERVIEW
# =============================================================================

@router.get("/{session_id}/overview", response_model=OverviewResponse, tags=["Overview"])
async def get_overview(session: Session = Depends(get_session)) -> OverviewResponse:
    return build_overview()


# =============================================================================
# WORKFLOW
# =============================================================================

@router.get("/{session_id}/workflow", response_model=WorkflowResponse, tags=["Workflow"])
async def get_workflow(session: Session = Depends(get_session)) -> WorkflowResponse:
    return build_workflow(session)


@router.post(
    "/{session_id}/workflow/{step_id}/advance",
    response_model=StepAdvanceResponse,
    responses={404: {"description": "Unknown session or step"}},
    tags=["Workflow"],
    summary="Cycle one step's status",
)
async def advance_step(
    step_id: str,
    session: Session = Depends(get_session),
) -> StepAdvanceResponse:
    try:
        label = session.workflow.advance(step_id)
    except UnknownStep as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return StepAdvanceResponse(step_id=step_id, status=label)


# =============================================================================
# TOOLING
# =============================================================================

@router.get("/{session_id}/tooling/logs", response_model=ToolingLogsResponse, tags=["Tooling"])
async def get_tool_logs(session: Session = Depends(get_session)) -> ToolingLogsResponse:
    return build_tooling(session)


@router.post(
    "/{session_id}/tooling/run",
    response_model=ToolingRunResponse,
    tags=["Tooling"],
    summary="Trigger a mock toolchain run",
)
async def run_toolchain(session: Session = Depends(get_session)) -> ToolingRunResponse:
    batch = session.tooling.run()
    return ToolingRunResponse(runs=session.tooling.runs, batch=build_entries(batch))


@router.delete(
    "/{session_id}/tooling/logs",
    response_model=ToolingLogsResponse,
    tags=["Tooling"],
    summary="Clear the execution log",
)
async def clear_tool_logs(session: Session = Depends(get_session)) -> ToolingLogsResponse:
    session.tooling.clear()
    return build_tooling(session)


# =============================================================================
# VALIDATION
# =============================================================================

@router.get("/{session_id}/validation", response_model=ValidationResponse, tags=["Validation"])
async def get_validation(session: Session = Depends(get_session)) -> ValidationResponse:
    return build_validation(session)


@router.post(
    "/{session_id}/validation/run",
    response_model=ValidationResponse,
    tags=["Validation"],
    summary="Run the verification loop (flips pass/fail)",
)
async def run_validation(session: Session = Depends(get_session)) -> ValidationResponse:
    session.validation.run()
    return build_validation(session)


# =============================================================================
# DATAVAULT
# =============================================================================

@router.get("/{session_id}/datavault", response_model=DataVaultResponse, tags=["DataVault"])
async def get_datavault(session: Session = Depends(get_session)) -> DataVaultResponse:
    return build_datavault(session)


@router.post(
    "/{session_id}/datavault/snapshots",
    response_model=DataVaultResponse,
    tags=["DataVault"],
    summary="Store a snapshot",
)
async def store_snapshot(session: Session = Depends(get_session)) -> DataVaultResponse:
    session.datavault.store_snapshot()
    return build_datavault(session)


@router.post(
    "/{session_id}/datavault/purge",
    response_model=DataVaultResponse,
    tags=["DataVault"],
    summary="Purge all snapshots",
)
async def purge_datavault(session: Session = Depends(get_session)) -> DataVaultResponse:
    session.datavault.purge()
    return build_datavault(session)
