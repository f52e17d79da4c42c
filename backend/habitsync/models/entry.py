"""
Pydantic models for a day's habit entry and the load/sync payloads
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_labels(items: List[Any]) -> List[str]:
    return ["" if item is None else str(item) for item in items]


class HabitEntry(BaseModel):
    """One calendar day's habit snapshot as stored in Notion"""
    date: str = Field(..., description="Entry date in YYYY-MM-DD format")
    habits: List[str] = Field(default_factory=list, description="Ordered habit labels")
    completed: List[str] = Field(default_factory=list, description="Labels marked done")
    notes: str = Field("", description="Free-text notes for the day")
    completion_percentage: Optional[Union[int, float]] = Field(0, description="Derived progress 0-100")
    page_id: Optional[str] = Field(None, description="Notion page backing this date")


class SyncRequest(BaseModel):
    """Request body for POST /sync"""
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="Entry date in YYYY-MM-DD format")
    habits: List[str] = Field(..., description="Ordered habit labels")
    completed: List[str] = Field(default_factory=list, description="Labels marked done")
    completion_percentage: Optional[Union[int, float]] = Field(0, alias="completionPercentage")
    notes: Optional[str] = Field("", description="Free-text notes for the day")

    @field_validator("date", mode="before")
    @classmethod
    def require_date(cls, v: Any) -> str:
        """Reject an empty date; other values are kept as text"""
        if not v:
            raise ValueError("date is required")
        return str(v)

    @field_validator("habits", mode="before")
    @classmethod
    def require_habit_list(cls, v: Any) -> List[str]:
        """Reject anything but a list; items are kept as text"""
        if not isinstance(v, list):
            raise ValueError("habits must be a list")
        return _as_labels(v)

    @field_validator("completed", mode="before")
    @classmethod
    def completed_as_labels(cls, v: Any) -> List[str]:
        return _as_labels(v) if isinstance(v, list) else []

    @field_validator("notes", mode="before")
    @classmethod
    def notes_as_text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    def to_entry(self) -> HabitEntry:
        """Convert the wire payload into a HabitEntry"""
        return HabitEntry(
            date=self.date,
            habits=self.habits,
            completed=self.completed,
            notes=self.notes or "",
            completion_percentage=self.completion_percentage,
        )


class LoadResponse(BaseModel):
    """Response body for GET /load"""
    model_config = ConfigDict(populate_by_name=True)

    found: bool
    date: str
    habits: List[str] = Field(default_factory=list)
    completed_today: Dict[str, bool] = Field(default_factory=dict, alias="completedToday")
    notes: str = ""
    page_id: Optional[str] = Field(None, alias="pageId")


class SyncResponse(BaseModel):
    """Response body for a successful POST /sync"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    notion_page_id: str = Field(..., alias="notionPageId")
    message: str
    is_update: bool = Field(..., alias="isUpdate")


class ErrorResponse(BaseModel):
    """Structured error body shared by both endpoints"""
    error: str
    message: Optional[str] = None
