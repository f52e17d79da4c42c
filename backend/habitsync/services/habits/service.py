"""
Habits Service - Business logic for loading and syncing a day's entry
"""
from typing import Any, Dict, Optional
import logging

from pydantic import ValidationError as PydanticValidationError

from habitsync.core.config import settings
from habitsync.core.exceptions import (
    AuthError,
    ConfigurationError,
    NotFoundError,
    TransportError,
    ValidationError
)
from habitsync.models.entry import LoadResponse, SyncRequest, SyncResponse
from habitsync.utils.timezone import get_today_str
from . import codec
from . import repository

logger = logging.getLogger(__name__)


def _require_configuration(message: Optional[str] = None) -> None:
    if not settings.is_notion_configured():
        logger.error("Missing Notion configuration")
        raise ConfigurationError(message=message)


def load_today(today: Optional[str] = None) -> Dict[str, Any]:
    """
    Load today's habit entry from Notion

    Only the most recently created page for the date is used.

    Args:
        today: Override date (YYYY-MM-DD); defaults to today in APP_TIMEZONE

    Returns:
        LoadResponse as a JSON-ready dict

    Raises:
        ConfigurationError: If Notion is not configured
        AuthError: If the API key is rejected
        NotFoundError: If the database id is unknown
        TransportError: If the query fails for any other reason
    """
    _require_configuration()
    today = today or get_today_str()

    try:
        pages = repository.find_entries_for_date(today, newest_first=True)
    except AuthError as e:
        raise AuthError() from e
    except NotFoundError as e:
        raise NotFoundError("Database not found. Check NOTION_DB_ID") from e
    except TransportError as e:
        raise TransportError("Failed to load from Notion", e.message) from e

    if not pages:
        logger.info(f"No entry found for {today}")
        response = LoadResponse(found=False, date=today)
        return response.model_dump(by_alias=True, exclude_none=True)

    entry = codec.parse_page(pages[0], default_date=today)
    logger.info(f"Loaded entry {entry.page_id} for {today} with {len(entry.habits)} habits")

    response = LoadResponse(
        found=True,
        date=today,
        habits=entry.habits,
        completed_today=codec.completion_map(entry.habits, entry.completed),
        notes=entry.notes,
        page_id=entry.page_id
    )
    return response.model_dump(by_alias=True, exclude_none=True)


def parse_sync_request(payload: Any) -> SyncRequest:
    """
    Validate a raw sync body

    Args:
        payload: Decoded JSON body

    Returns:
        Parsed SyncRequest

    Raises:
        ValidationError: If the body is not an object, date is missing or habits is not a list
    """
    if not isinstance(payload, dict):
        raise ValidationError(message="Request body must be a JSON object")
    try:
        return SyncRequest.model_validate(payload)
    except PydanticValidationError as e:
        fields = ", ".join(dict.fromkeys(str(err["loc"][0]) for err in e.errors() if err["loc"]))
        raise ValidationError(message=f"Invalid fields: {fields}") from e


def sync_entry(payload: Any) -> Dict[str, Any]:
    """
    Create or update the Notion entry for a date

    An existing page for the date is updated in place; otherwise a new page
    is created. Concurrent syncs for the same date are last-writer-wins.

    Args:
        payload: Decoded JSON body with date, habits, completed,
            completionPercentage and notes

    Returns:
        SyncResponse as a JSON-ready dict

    Raises:
        ConfigurationError: If Notion is not configured
        ValidationError: If the payload is malformed
        AuthError: If the API key is rejected
        NotFoundError: If the database id is unknown
        TransportError: If Notion fails for any other reason
    """
    _require_configuration("Check environment variables")
    request = parse_sync_request(payload)
    entry = request.to_entry()
    properties = codec.build_properties(entry)

    try:
        existing = repository.find_entries_for_date(entry.date, newest_first=False)
        if existing:
            page_id = existing[0]["id"]
            page = repository.update_entry(page_id, properties)
        else:
            page_id = None
            page = repository.create_entry(properties)
    except TransportError as e:
        raise TransportError("Failed to sync to Notion", e.message) from e

    is_update = page_id is not None
    logger.info(f"{'Updated' if is_update else 'Created'} entry {page['id']} for {entry.date}")

    response = SyncResponse(
        notion_page_id=page["id"],
        message="Updated in Notion" if is_update else "Created in Notion",
        is_update=is_update
    )
    return response.model_dump(by_alias=True)
