"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    # Notion
    NOTION_KEY: str = os.getenv("NOTION_KEY", "")
    NOTION_DB_ID: str = os.getenv("NOTION_DB_ID", "")

    # Day boundary for "today's entry"
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "UTC")

    # Terminal front end
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def notion_database_id(self) -> str:
        """Database id without the dashes Notion share links include"""
        return self.NOTION_DB_ID.replace("-", "")

    def is_notion_configured(self) -> bool:
        """Check both Notion secrets are present"""
        return bool(self.NOTION_KEY and self.NOTION_DB_ID)


# Create a global settings instance
settings = Settings()
