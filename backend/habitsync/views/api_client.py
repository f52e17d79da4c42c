"""
API Client - HTTP calls from the front end to the load and sync endpoints
"""
import logging
from typing import Any, Dict, Optional

import requests

from habitsync.core.config import settings
from habitsync.core.exceptions import ApiClientError

logger = logging.getLogger(__name__)


def _base(api_base: Optional[str]) -> str:
    return (api_base or settings.API_BASE_URL).rstrip("/")


def load_habits(api_base: Optional[str] = None) -> Dict[str, Any]:
    """
    Fetch today's entry from GET /load

    Args:
        api_base: Backend base URL; defaults to API_BASE_URL

    Returns:
        Decoded load response

    Raises:
        ApiClientError: If the request fails or the backend returns an error
    """
    try:
        response = requests.get(
            f"{_base(api_base)}/load",
            headers={"Content-Type": "application/json"}
        )
    except requests.RequestException as e:
        logger.error(f"Load request failed: {e}")
        raise ApiClientError(str(e)) from e

    if not response.ok:
        raise ApiClientError("Failed to load habits from Notion")
    return response.json()


def sync_habits(payload: Dict[str, Any], api_base: Optional[str] = None) -> Dict[str, Any]:
    """
    Persist the current state with POST /sync

    Args:
        payload: Sync body built from the habit state
        api_base: Backend base URL; defaults to API_BASE_URL

    Returns:
        Decoded sync response

    Raises:
        ApiClientError: Carrying the backend's message when the sync fails
    """
    try:
        response = requests.post(f"{_base(api_base)}/sync", json=payload)
    except requests.RequestException as e:
        logger.error(f"Sync request failed: {e}")
        raise ApiClientError(str(e)) from e

    if not response.ok:
        try:
            body = response.json()
        except ValueError:
            body = {}
        raise ApiClientError(body.get("message") or "Sync failed")
    return response.json()
