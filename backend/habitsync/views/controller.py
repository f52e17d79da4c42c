"""
Tracker Controller - Wires user actions to the habit state and the API

Every action runs to completion before the next one starts. Failures are
caught per action and shown in the status banner; nothing is retried.
"""
import logging
from datetime import date
from typing import Any, Callable, Dict, Optional

from habitsync.core.exceptions import ApiClientError, HabitStateError
from habitsync.services.habits.state import HabitState
from habitsync.utils.timezone import get_today_date
from .api_client import load_habits, sync_habits
from .render import (
    STATUS_ERROR,
    STATUS_LOADING,
    STATUS_SUCCESS,
    StatusBanner,
    render_screen
)

logger = logging.getLogger(__name__)


class TrackerController:
    """Owns the habit state and the status banner for one session"""

    def __init__(self, state: Optional[HabitState] = None,
                 banner: Optional[StatusBanner] = None,
                 loader: Callable[[], Dict[str, Any]] = load_habits,
                 syncer: Callable[[Dict[str, Any]], Dict[str, Any]] = sync_habits,
                 today: Optional[date] = None):
        self.state = state or HabitState()
        self.banner = banner or StatusBanner()
        self.today = today or get_today_date()
        self._loader = loader
        self._syncer = syncer
        self.syncing = False

    def load(self) -> None:
        """Hydrate state from GET /load"""
        self.banner.show("Loading your habits...", STATUS_LOADING)
        try:
            data = self._loader()
        except ApiClientError as e:
            logger.error(f"Load error: {e}")
            self.banner.show(f"Error loading habits: {e}", STATUS_ERROR)
            return

        self.state.hydrate(data)
        if data.get("found"):
            self.banner.show("Habits loaded from Notion", STATUS_SUCCESS)
        else:
            self.banner.show("No habits yet for today", STATUS_SUCCESS)

    def add_habit(self, text: str) -> None:
        try:
            self.state.add(text)
        except HabitStateError as e:
            self.banner.show(str(e), STATUS_ERROR)
            return
        self.banner.show("Habit added successfully", STATUS_SUCCESS)

    def toggle_habit(self, index: int) -> None:
        try:
            self.state.toggle(index)
        except HabitStateError as e:
            self.banner.show(str(e), STATUS_ERROR)

    def delete_habit(self, index: int) -> None:
        try:
            self.state.delete(index)
        except HabitStateError as e:
            self.banner.show(str(e), STATUS_ERROR)

    def reset_day(self) -> None:
        try:
            self.state.reset_day()
        except HabitStateError as e:
            self.banner.show(str(e), STATUS_ERROR)
            return
        self.banner.show("Day reset - all habits unchecked", STATUS_SUCCESS)

    def edit_notes(self, text: str) -> None:
        self.state.set_notes(text)

    def sync(self) -> bool:
        """
        Persist current state with POST /sync

        Refused while another sync is in flight. The in-flight flag is
        cleared whatever the outcome.

        Returns:
            True if the sync succeeded
        """
        if self.syncing:
            self.banner.show("Sync already in progress", STATUS_ERROR)
            return False

        try:
            payload = self.state.to_sync_payload()
        except HabitStateError as e:
            self.banner.show(str(e), STATUS_ERROR)
            return False

        self.syncing = True
        try:
            self.banner.show("Syncing to Notion...", STATUS_LOADING)
            self._syncer(payload)
            self.banner.show("✓ Synced to Notion successfully", STATUS_SUCCESS)
            return True
        except ApiClientError as e:
            logger.error(f"Sync error: {e}")
            self.banner.show(f"Sync failed: {e}", STATUS_ERROR)
            return False
        finally:
            self.syncing = False

    def render(self) -> str:
        return render_screen(self.state, self.banner, self.today)
