"""
Vercel Serverless Function Entry Point

Wraps the FastAPI application for Vercel's serverless Python runtime.
Vercel expects Python functions in the /api directory and detects the
'app' variable as an ASGI application.
"""

import sys
from pathlib import Path

# Add the project root to Python path so imports work
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from agentdeck.api.main import app

handler = app
