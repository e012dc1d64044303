"""
Overview — Static Framework Summary & Screen Registry

Everything here is decoration: the metric values are fixed labels, not
measurements.
"""

from dataclasses import dataclass, asdict
from typing import List


class UnknownScreen(LookupError):
    """Raised when a screen key is not registered."""


# Navigation order matters: it is the order of the tab bar
SCREEN_LABELS = {
    "overview": "Overview",
    "workflow": "Workflow",
    "tooling": "Tooling",
    "validation": "Validation",
    "datavault": "DataVault",
}

DEFAULT_SCREEN = "overview"

FRAMEWORK_SUMMARY = (
    "Custom agent that decomposes tasks, orchestrates tools, and validates "
    "outputs with dual-LLM verification."
)


@dataclass(frozen=True)
class Metric:
    label: str
    value: str
    note: str


OVERVIEW_METRICS = (
    Metric("Goals Planned", "14", "Active workflows"),
    Metric("Tools Routed", "9", "Regex routing"),
    Metric("Validation Pass", "96%", "Last 24h"),
    Metric("Context Saved", "38%", "DataVault offload"),
)

HIGHLIGHTS = (
    "Kotlin + Jetpack Compose runtime",
    "External DataVault storage layer",
    "Regex-based tool orchestration",
    "Dual-LLM verification loop",
)


def resolve_screen(key: str) -> str:
    """Validate a screen key. Returns it unchanged."""
    if key not in SCREEN_LABELS:
        raise UnknownScreen(
            f"screen must be one of {list(SCREEN_LABELS)}, got {key!r}"
        )
    return key


def overview_snapshot() -> dict:
    return {
        "summary": FRAMEWORK_SUMMARY,
        "metrics": [asdict(m) for m in OVERVIEW_METRICS],
        "highlights": list(HIGHLIGHTS),
    }


def navigation() -> List[dict]:
    return [{"key": key, "label": label} for key, label in SCREEN_LABELS.items()]
