"""
Sync Routes - Persist the day's habit entry
"""
import json
import logging
from fastapi import APIRouter, Request

from habitsync.core.exceptions import HabitSyncException, ValidationError
from habitsync.services import habit_service
from .responses import (
    UNSUPPORTED_METHODS,
    error_response,
    json_response,
    method_not_allowed_response,
    preflight_response,
    unexpected_error_response
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sync"])


@router.post("/sync")
async def sync_entry(request: Request):
    """
    Create or update the Notion entry for a date

    Body: {date, habits, completed, completionPercentage, notes}
    """
    try:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError(message="Body is not valid JSON") from e
        return json_response(habit_service.sync_entry(payload), status_code=201)
    except HabitSyncException as e:
        logger.warning(f"Sync failed: {e.error}")
        return error_response(e)
    except Exception as e:
        logger.exception("Unexpected error syncing to Notion")
        return unexpected_error_response("Failed to sync to Notion", e)


@router.options("/sync")
async def sync_preflight():
    """CORS preflight"""
    return preflight_response()


@router.api_route("/sync", methods=["GET"] + UNSUPPORTED_METHODS, include_in_schema=False)
async def sync_method_not_allowed():
    return method_not_allowed_response()
