"""
Pydantic Schemas — API Request/Response Models

Response models mirror what each screen renders. Timestamps are
timezone-aware UTC; log lines also carry their pre-rendered
'[HH:MM:SS] text' form.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from agentdeck.screens import SCREEN_LABELS


# ============================================================================
# Request Models
# ============================================================================

class ScreenSelectRequest(BaseModel):
    """Select the active screen."""
    screen: str = Field(..., min_length=1, description="Screen key (e.g., workflow)")

    @field_validator('screen')
    @classmethod
    def validate_screen(cls, v: str) -> str:
        """Validate screen is one of the registered keys."""
        key = v.strip().lower()
        if key not in SCREEN_LABELS:
            raise ValueError(f"screen must be one of {list(SCREEN_LABELS)}, got '{v}'")
        return key


# ============================================================================
# Response Models
# ============================================================================

class LogEntryResponse(BaseModel):
    """One log entry."""
    id: str
    seq: int
    timestamp: datetime
    text: str
    display: str


class NavItem(BaseModel):
    key: str
    label: str


class SessionResponse(BaseModel):
    """Session identity and navigation state."""
    session_id: str
    created_at: datetime
    active_screen: str
    screens: List[NavItem]


class MetricCard(BaseModel):
    label: str
    value: str
    note: str


class OverviewResponse(BaseModel):
    summary: str
    metrics: List[MetricCard]
    highlights: List[str]


class WorkflowStepResponse(BaseModel):
    id: str
    title: str
    note: str
    status: str


class WorkflowResponse(BaseModel):
    status_order: List[str]
    steps: List[WorkflowStepResponse]


class StepAdvanceResponse(BaseModel):
    step_id: str
    status: str


class ToolingLogsResponse(BaseModel):
    """Execution log, newest first."""
    runs: int
    count: int
    entries: List[LogEntryResponse]
    hint: Optional[str] = Field(default=None, description="Shown when no runs exist")


class ToolingRunResponse(BaseModel):
    runs: int
    batch: List[LogEntryResponse]


class ValidationResponse(BaseModel):
    status: str
    last_run: Optional[datetime] = None
    last_run_label: str = Field(..., description="Clock time of the last run, or '—'")
    history: List[LogEntryResponse]


class DataVaultResponse(BaseModel):
    snapshots: int
    memory_gb: float
    memory_label: str
    last_sync: Optional[datetime] = None
    last_sync_label: str
    retention_days: int


class SessionSnapshotResponse(SessionResponse):
    """Full state of every screen for one session."""
    overview: OverviewResponse
    workflow: WorkflowResponse
    tooling: ToolingLogsResponse
    validation: ValidationResponse
    datavault: DataVaultResponse


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    sessions: int
    message: str
