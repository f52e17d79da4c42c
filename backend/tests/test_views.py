"""
Tests for the terminal front end: banner, rendering, controller and commands
"""
from datetime import date

import pytest
import requests

import cli
from habitsync.core.exceptions import ApiClientError
from habitsync.services.habits.state import HabitState
from habitsync.views import api_client
from habitsync.views.controller import TrackerController
from habitsync.views.render import (
    STATUS_ERROR,
    STATUS_LOADING,
    STATUS_SUCCESS,
    StatusBanner,
    render_habit_count,
    render_progress_bar
)

TODAY = date(2024, 1, 1)


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def make_controller(clock, loader=None, syncer=None, habits=()):
    return TrackerController(
        state=HabitState(habits=list(habits), date="2024-01-01"),
        banner=StatusBanner(clock=clock),
        loader=loader or (lambda: {"found": False, "date": "2024-01-01"}),
        syncer=syncer or (lambda payload: {"success": True}),
        today=TODAY
    )


# ============================================================================
# STATUS BANNER
# ============================================================================

def test_banner_dismisses_after_three_seconds(clock):
    banner = StatusBanner(clock=clock)
    banner.show("Habit added successfully", STATUS_SUCCESS)

    clock.now += 2.5
    assert banner.current() == ("Habit added successfully", STATUS_SUCCESS)
    clock.now += 0.5
    assert banner.current() is None


def test_loading_banner_stays_until_replaced(clock):
    banner = StatusBanner(clock=clock)
    banner.show("Syncing to Notion...", STATUS_LOADING)

    clock.now += 60
    assert banner.current() == ("Syncing to Notion...", STATUS_LOADING)

    banner.show("Sync failed: boom", STATUS_ERROR)
    clock.now += 3
    assert banner.current() is None


# ============================================================================
# RENDERING
# ============================================================================

def test_habit_count_pluralizes():
    assert render_habit_count(0) == "0 habits"
    assert render_habit_count(1) == "1 habit"
    assert render_habit_count(2) == "2 habits"


def test_progress_bar():
    assert render_progress_bar(0, width=10) == "[░░░░░░░░░░] 0%"
    assert render_progress_bar(50, width=10) == "[█████░░░░░] 50%"
    assert render_progress_bar(100, width=10) == "[██████████] 100%"


def test_render_screen(clock):
    controller = make_controller(clock, habits=["Read", "Run"])
    controller.toggle_habit(1)
    controller.edit_notes("ok")

    screen = controller.render()

    assert "Monday, January 1, 2024" in screen
    assert "Habits (2 habits)" in screen
    assert "[ ] 1. Read" in screen
    assert "[x] 2. Run" in screen
    assert "50%" in screen
    assert "Notes (2 chars): ok" in screen


def test_render_empty_list(clock):
    screen = make_controller(clock).render()
    assert "No habits added yet. Add one to get started!" in screen
    assert "0%" in screen


# ============================================================================
# CONTROLLER
# ============================================================================

def test_load_found(clock):
    controller = make_controller(clock, loader=lambda: {
        "found": True,
        "date": "2024-01-01",
        "habits": ["Read", "Run"],
        "completedToday": {"0": True},
        "notes": "ok",
        "pageId": "page-1",
    })

    controller.load()

    assert controller.state.habits == ["Read", "Run"]
    assert controller.state.completed == {0: True}
    assert controller.banner.current() == ("Habits loaded from Notion", STATUS_SUCCESS)


def test_load_not_found(clock):
    controller = make_controller(clock, habits=["Stale"])
    controller.load()
    assert controller.state.habits == []
    assert controller.banner.current() == ("No habits yet for today", STATUS_SUCCESS)


def test_load_failure_shows_error(clock):
    def failing_loader():
        raise ApiClientError("Failed to load habits from Notion")

    controller = make_controller(clock, loader=failing_loader, habits=["Read", "Run"])
    controller.toggle_habit(1)
    controller.edit_notes("unsynced")

    controller.load()

    assert controller.state.habits == ["Read", "Run"]
    assert controller.state.completed == {1: True}
    assert controller.state.notes == "unsynced"
    assert controller.banner.current() == (
        "Error loading habits: Failed to load habits from Notion", STATUS_ERROR
    )


def test_add_errors_are_shown(clock):
    controller = make_controller(clock, habits=[f"Habit {i}" for i in range(15)])

    controller.add_habit("One more")
    assert controller.banner.current() == ("Maximum 15 habits reached", STATUS_ERROR)

    controller.add_habit("")
    assert controller.banner.current() == ("Please enter a habit name", STATUS_ERROR)
    assert len(controller.state.habits) == 15


def test_reset_day_messages(clock):
    controller = make_controller(clock, habits=["Read"])

    controller.reset_day()
    assert controller.banner.current() == ("No habits to reset", STATUS_ERROR)

    controller.toggle_habit(0)
    controller.reset_day()
    assert controller.state.completed == {}
    assert controller.banner.current() == ("Day reset - all habits unchecked", STATUS_SUCCESS)


def test_sync_sends_payload(clock):
    sent = []
    controller = make_controller(clock, syncer=sent.append, habits=["Read", "Run"])
    controller.toggle_habit(1)

    assert controller.sync() is True

    assert sent == [{
        "date": "2024-01-01",
        "habits": ["Read", "Run"],
        "completed": ["Run"],
        "completionPercentage": 50,
        "notes": "",
    }]
    assert controller.banner.current() == ("✓ Synced to Notion successfully", STATUS_SUCCESS)
    assert controller.syncing is False


def test_sync_refused_while_in_flight(clock):
    nested = []

    def syncer(payload):
        assert controller.syncing is True
        nested.append(controller.sync())
        return {"success": True}

    controller = make_controller(clock, syncer=syncer, habits=["Read"])

    assert controller.sync() is True
    assert nested == [False]
    assert controller.syncing is False


def test_sync_failure_reenables(clock):
    def failing_syncer(payload):
        raise ApiClientError("Database not found")

    controller = make_controller(clock, syncer=failing_syncer, habits=["Read"])

    assert controller.sync() is False
    assert controller.syncing is False
    assert controller.banner.current() == ("Sync failed: Database not found", STATUS_ERROR)


def test_sync_without_habits(clock):
    calls = []
    controller = make_controller(clock, syncer=calls.append)
    assert controller.sync() is False
    assert calls == []
    assert controller.banner.current() == ("Add habits before syncing", STATUS_ERROR)


# ============================================================================
# COMMANDS
# ============================================================================

def test_commands_drive_controller(clock):
    controller = make_controller(clock)

    assert cli.call_command(controller, "add Read")
    assert cli.call_command(controller, "add Run")
    assert cli.call_command(controller, "2")
    assert cli.call_command(controller, "notes slept well")
    assert controller.state.completed_labels() == ["Run"]
    assert controller.state.notes == "slept well"

    assert cli.call_command(controller, "delete 1")
    assert controller.state.habits == ["Run"]
    assert controller.state.completed == {0: True}

    assert cli.call_command(controller, "quit") is False


def test_notes_command_keeps_text_verbatim(clock):
    controller = make_controller(clock)
    cli.call_command(controller, "notes   slept well  ")
    assert controller.state.notes == "  slept well  "


def test_bad_position_is_ignored(clock, capsys):
    controller = make_controller(clock, habits=["Read"])
    cli.call_command(controller, "toggle zero")
    assert "Usage: toggle <habit number>" in capsys.readouterr().out
    assert controller.state.completed == {}


def test_parse_position():
    assert cli.parse_position("1") == 0
    assert cli.parse_position("0") is None
    assert cli.parse_position("x") is None


# ============================================================================
# API CLIENT
# ============================================================================

class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self.ok = status_code < 400
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


def test_load_habits_calls_backend(monkeypatch):
    calls = []

    def fake_get(url, headers=None):
        calls.append(url)
        return FakeResponse(200, {"found": False})

    monkeypatch.setattr(api_client.requests, "get", fake_get)

    assert api_client.load_habits("http://backend/") == {"found": False}
    assert calls == ["http://backend/load"]


def test_load_habits_error(monkeypatch):
    monkeypatch.setattr(api_client.requests, "get", lambda url, headers=None: FakeResponse(500, {}))
    with pytest.raises(ApiClientError, match="Failed to load habits from Notion"):
        api_client.load_habits("http://backend")


def test_sync_habits_uses_backend_message(monkeypatch):
    monkeypatch.setattr(
        api_client.requests, "post",
        lambda url, json=None: FakeResponse(404, {"error": "Database not found", "message": "Check NOTION_DB_ID"})
    )
    with pytest.raises(ApiClientError, match="Check NOTION_DB_ID"):
        api_client.sync_habits({"date": "2024-01-01"}, "http://backend")


def test_sync_habits_without_message(monkeypatch):
    monkeypatch.setattr(api_client.requests, "post", lambda url, json=None: FakeResponse(502, None))
    with pytest.raises(ApiClientError, match="Sync failed"):
        api_client.sync_habits({"date": "2024-01-01"}, "http://backend")


def test_connection_errors_become_client_errors(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(api_client.requests, "post", refuse)
    with pytest.raises(ApiClientError, match="connection refused"):
        api_client.sync_habits({"date": "2024-01-01"}, "http://backend")
