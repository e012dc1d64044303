"""
API Module — FastAPI Console State Service

Public API:
- app: FastAPI application instance
- create_app: Application factory (fresh SessionStore per app)
- router: API routes
"""

from .main import app, create_app
from .routes import router

__all__ = [
    "app",
    "create_app",
    "router",
]
