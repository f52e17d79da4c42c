"""
Habits Repository - Centralized Notion access layer
All queries, creates and updates against the habit database
"""
from typing import Any, Dict, List
import logging

from notion_client import APIErrorCode

from habitsync.core.config import settings
from habitsync.core.constants import PROPERTY_DATE
from habitsync.core.dependencies import get_notion_client
from habitsync.core.exceptions import (
    AuthError,
    HabitSyncException,
    NotFoundError,
    TransportError
)

logger = logging.getLogger(__name__)


def translate_notion_error(error: Exception) -> HabitSyncException:
    """
    Map a Notion client failure onto the application error types

    Args:
        error: Exception raised by the Notion client or transport

    Returns:
        AuthError, NotFoundError or TransportError
    """
    code = getattr(error, "code", None)
    if code == APIErrorCode.Unauthorized:
        return AuthError(message=str(error))
    if code == APIErrorCode.ObjectNotFound:
        return NotFoundError(message="Check NOTION_DB_ID")
    return TransportError(message=str(error))


# ============================================================================
# HABIT DATABASE
# ============================================================================

def find_entries_for_date(entry_date: str, newest_first: bool = True) -> List[Dict[str, Any]]:
    """
    Get all pages whose Date title equals a date

    Args:
        entry_date: Date in YYYY-MM-DD format
        newest_first: Sort by creation time, newest first

    Returns:
        List of Notion page objects

    Raises:
        ConfigurationError: If Notion is not configured
        AuthError: If the API key is rejected
        NotFoundError: If the database id is unknown
        TransportError: If the query fails for any other reason
    """
    notion = get_notion_client()
    query = {
        "database_id": settings.notion_database_id,
        "filter": {
            "property": PROPERTY_DATE,
            "title": {"equals": entry_date},
        },
    }
    if newest_first:
        query["sorts"] = [{"timestamp": "created_time", "direction": "descending"}]

    try:
        response = notion.databases.query(**query)
        return response.get("results", [])
    except Exception as e:
        logger.error(f"Notion error querying entries for {entry_date} "
                     f"(database {settings.notion_database_id}): {e}")
        raise translate_notion_error(e) from e


def create_entry(properties: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a new page in the habit database

    Args:
        properties: Encoded Notion properties

    Returns:
        Created page object

    Raises:
        HabitSyncException: If Notion is not configured or the create fails
    """
    notion = get_notion_client()
    try:
        return notion.pages.create(
            parent={"database_id": settings.notion_database_id},
            properties=properties
        )
    except Exception as e:
        logger.error(f"Notion error creating entry (database {settings.notion_database_id}): {e}")
        raise translate_notion_error(e) from e


def update_entry(page_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update an existing page in place

    Args:
        page_id: The Notion page id
        properties: Encoded Notion properties

    Returns:
        Updated page object

    Raises:
        HabitSyncException: If Notion is not configured or the update fails
    """
    notion = get_notion_client()
    try:
        return notion.pages.update(page_id=page_id, properties=properties)
    except Exception as e:
        logger.error(f"Notion error updating entry {page_id}: {e}")
        raise translate_notion_error(e) from e
