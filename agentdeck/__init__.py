"""
Agent Console — In-memory state for the agent console mockup.

Subpackages:
- state: StatusCycle and EventLog primitives
- screens: Per-screen state built on those primitives
- api: FastAPI service exposing per-session state
"""

__version__ = "1.0.0"
