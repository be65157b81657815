"""FastAPI REST API for cutting-stock optimization.

Usage:
    uvicorn sheetcut.web:app --reload
"""

from sheetcut.web.app import app, create_app

__all__ = ["app", "create_app"]
