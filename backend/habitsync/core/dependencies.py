"""
Dependency injection for shared clients and resources
"""
import logging
from typing import Optional

from notion_client import Client

from habitsync.core.config import settings
from habitsync.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_notion_client: Optional[Client] = None


def get_notion_client() -> Client:
    """
    Get the shared Notion client, creating it on first use

    Returns:
        Authenticated Notion client

    Raises:
        ConfigurationError: If NOTION_KEY or NOTION_DB_ID is missing
    """
    global _notion_client

    if not settings.is_notion_configured():
        logger.error("Missing Notion configuration")
        raise ConfigurationError(message="Check environment variables")

    if _notion_client is None:
        _notion_client = Client(auth=settings.NOTION_KEY)
        logger.info("Notion client initialized")
    return _notion_client


def set_notion_client(client: Optional[Client]) -> None:
    """Replace the shared Notion client (None forces re-creation)"""
    global _notion_client
    _notion_client = client
