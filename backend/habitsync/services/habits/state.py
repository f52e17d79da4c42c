"""
Habit State - Today's habit list, completion flags and notes

Completion flags are keyed by habit position, so every change to the
habit list keeps the positions in step with the list order.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from habitsync.core.constants import MAX_HABITS
from habitsync.core.exceptions import (
    HabitLimitError,
    HabitNotFoundError,
    InvalidHabitDataError,
    NothingToResetError
)
from habitsync.utils.timezone import get_today_str


def progress_percent(total: int, done: int) -> int:
    """
    Percentage of habits done, rounded half up

    Args:
        total: Number of habits
        done: Number of completed habits

    Returns:
        Integer 0-100, or 0 when there are no habits
    """
    if total <= 0:
        return 0
    return (200 * done + total) // (2 * total)


@dataclass
class HabitState:
    """In-memory state for one day of habits"""
    habits: List[str] = field(default_factory=list)
    completed: Dict[int, bool] = field(default_factory=dict)
    notes: str = ""
    date: str = field(default_factory=get_today_str)
    last_loaded_date: Optional[str] = None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.habits):
            raise HabitNotFoundError(f"No habit at position {index + 1}")

    def add(self, text: str) -> str:
        """
        Append a habit

        Args:
            text: Habit label, surrounding whitespace ignored

        Returns:
            The stored label

        Raises:
            InvalidHabitDataError: If the label is empty
            HabitLimitError: If the list already holds MAX_HABITS habits
        """
        label = (text or "").strip()
        if not label:
            raise InvalidHabitDataError("Please enter a habit name")
        if len(self.habits) >= MAX_HABITS:
            raise HabitLimitError(f"Maximum {MAX_HABITS} habits reached")
        self.habits.append(label)
        return label

    def toggle(self, index: int) -> bool:
        """Flip the done flag at a position and return the new value"""
        self._check_index(index)
        self.completed[index] = not self.completed.get(index, False)
        return self.completed[index]

    def delete(self, index: int) -> str:
        """
        Remove the habit at a position

        The flag at that position is dropped and every flag after it moves
        down by one.

        Returns:
            The removed label
        """
        self._check_index(index)
        label = self.habits.pop(index)
        self.completed = {
            (i - 1 if i > index else i): done
            for i, done in self.completed.items()
            if i != index
        }
        return label

    def reset_day(self) -> None:
        """
        Clear every completion flag

        Raises:
            NothingToResetError: If no habit is completed; flags are left as they are
        """
        if not any(self.completed.values()):
            raise NothingToResetError("No habits to reset")
        self.completed = {}

    def set_notes(self, text: str) -> None:
        self.notes = text

    def completed_count(self) -> int:
        return sum(1 for done in self.completed.values() if done)

    def progress(self) -> int:
        return progress_percent(len(self.habits), self.completed_count())

    def completed_labels(self) -> List[str]:
        """Labels of completed habits, in list order"""
        return [
            self.habits[i]
            for i in sorted(self.completed)
            if self.completed[i] and i < len(self.habits)
        ]

    def is_completed(self, index: int) -> bool:
        return self.completed.get(index, False)

    def clear(self) -> None:
        """Start the day from an empty list"""
        self.habits = []
        self.completed = {}
        self.notes = ""

    def hydrate(self, data: Dict[str, Any]) -> None:
        """
        Replace state with a /load response

        Args:
            data: Load response with habits, completedToday, notes and date
        """
        if not data.get("found"):
            self.clear()
            return

        self.habits = list(data.get("habits") or [])
        self.completed = {
            int(i): bool(done)
            for i, done in (data.get("completedToday") or {}).items()
        }
        self.notes = data.get("notes") or ""
        self.last_loaded_date = data.get("date")

    def to_sync_payload(self) -> Dict[str, Any]:
        """
        Build the POST /sync body for the current state

        Raises:
            InvalidHabitDataError: If there are no habits to sync
        """
        if not self.habits:
            raise InvalidHabitDataError("Add habits before syncing")
        return {
            "date": self.date,
            "habits": list(self.habits),
            "completed": self.completed_labels(),
            "completionPercentage": self.progress(),
            "notes": self.notes,
        }
