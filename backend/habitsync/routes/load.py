"""
Load Routes - Read today's habit entry
"""
import logging
from fastapi import APIRouter

from habitsync.core.exceptions import HabitSyncException
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

router = APIRouter(tags=["load"])


@router.get("/load")
async def load_today():
    """Get today's habits, completion flags and notes from Notion"""
    try:
        return json_response(habit_service.load_today())
    except HabitSyncException as e:
        logger.warning(f"Load failed: {e.error}")
        return error_response(e)
    except Exception as e:
        logger.exception("Unexpected error loading from Notion")
        return unexpected_error_response("Failed to load from Notion", e)


@router.options("/load")
async def load_preflight():
    """CORS preflight"""
    return preflight_response()


@router.api_route("/load", methods=["POST"] + UNSUPPORTED_METHODS, include_in_schema=False)
async def load_method_not_allowed():
    return method_not_allowed_response()
