"""
Timezone Utilities - Centralized "today" handling
"""
from datetime import date, datetime
import pytz

from habitsync.core.config import settings


def get_app_tz():
    """
    Get the timezone that decides where a day starts

    Returns:
        pytz timezone for APP_TIMEZONE (UTC when unset)
    """
    return pytz.timezone(settings.APP_TIMEZONE)


def get_app_now() -> datetime:
    """Get current timezone-aware datetime in the app timezone"""
    return datetime.now(get_app_tz())


def get_today_date() -> date:
    """Get today's date in the app timezone"""
    return get_app_now().date()


def get_today_str() -> str:
    """Get today's date as YYYY-MM-DD, the key of a day's Notion entry"""
    return get_today_date().isoformat()


def format_long_date(day: date) -> str:
    """
    Format a date for display, e.g. "Saturday, October 17, 2026"

    Args:
        day: The date to format

    Returns:
        Human-readable date string
    """
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"
