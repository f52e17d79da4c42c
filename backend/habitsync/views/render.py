"""
Render - Text projection of the habit state and the status banner
"""
from datetime import date
import time
from typing import Callable, List, Optional, Tuple

from habitsync.core.constants import STATUS_DISMISS_SECONDS
from habitsync.services.habits.state import HabitState
from habitsync.utils.timezone import format_long_date

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"
STATUS_LOADING = "loading"

STATUS_ICONS = {
    STATUS_SUCCESS: "✅",
    STATUS_ERROR: "❌",
    STATUS_LOADING: "⏳",
}

EMPTY_LIST_MESSAGE = "No habits added yet. Add one to get started!"


class StatusBanner:
    """
    Transient status line

    Success and error messages disappear STATUS_DISMISS_SECONDS after they
    are shown. Loading messages stay until another status replaces them.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 timeout: float = STATUS_DISMISS_SECONDS):
        self._clock = clock
        self._timeout = timeout
        self._message: Optional[str] = None
        self._kind: Optional[str] = None
        self._shown_at = 0.0

    def show(self, message: str, kind: str) -> None:
        self._message = message
        self._kind = kind
        self._shown_at = self._clock()

    def current(self) -> Optional[Tuple[str, str]]:
        """Return (message, kind) while visible, else None"""
        if self._message is None:
            return None
        if self._kind != STATUS_LOADING and self._clock() - self._shown_at >= self._timeout:
            return None
        return self._message, self._kind


def render_habit_count(count: int) -> str:
    return f"{count} habit{'' if count == 1 else 's'}"


def render_progress_bar(percent: int, width: int = 20) -> str:
    """Render e.g. "[██████░░░░░░░░░░░░░░] 30%" """
    filled = round(width * percent / 100)
    return f"[{'█' * filled}{'░' * (width - filled)}] {percent}%"


def render_habit_rows(state: HabitState) -> List[str]:
    """One checkbox row per habit, numbered from 1"""
    if not state.habits:
        return [f"  {EMPTY_LIST_MESSAGE}"]
    return [
        f"  [{'x' if state.is_completed(i) else ' '}] {i + 1}. {habit}"
        for i, habit in enumerate(state.habits)
    ]


def render_status(banner: StatusBanner) -> Optional[str]:
    status = banner.current()
    if status is None:
        return None
    message, kind = status
    return f"{STATUS_ICONS.get(kind, '')} {message}".strip()


def render_screen(state: HabitState, banner: StatusBanner, today: date) -> str:
    """
    Render the whole tracker screen

    Args:
        state: Today's habit state
        banner: Status banner to show above the list
        today: Date shown in the header

    Returns:
        Multi-line string ready to print
    """
    lines = [f"📅 {format_long_date(today)}"]

    status_line = render_status(banner)
    if status_line:
        lines.append(status_line)

    lines.append("")
    lines.append(f"Habits ({render_habit_count(len(state.habits))})")
    lines.extend(render_habit_rows(state))
    lines.append("")
    lines.append(f"Progress {render_progress_bar(state.progress())}")
    lines.append(f"Notes ({len(state.notes)} chars): {state.notes}")
    return "\n".join(lines)
