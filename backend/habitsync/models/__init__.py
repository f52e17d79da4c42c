"""
Pydantic models for the application
"""
from habitsync.models.entry import (
    HabitEntry,
    SyncRequest,
    LoadResponse,
    SyncResponse,
    ErrorResponse
)

__all__ = [
    "HabitEntry",
    "SyncRequest",
    "LoadResponse",
    "SyncResponse",
    "ErrorResponse"
]
