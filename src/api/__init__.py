"""API module for the add bid service."""

from .app import app, create_app
from .dtos import AddRequest, AddResponse

__all__ = [
    "app",
    "create_app",
    "AddRequest",
    "AddResponse",
]
