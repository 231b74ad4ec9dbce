"""FastAPI application and page templates."""

from .app import create_app
from .pages import PageBuilder

__all__ = ["create_app", "PageBuilder"]
