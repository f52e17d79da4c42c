"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from habitsync.core.config import settings
from habitsync.core.constants import CORS_HEADERS
from habitsync.routes import health, load, sync

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('notion_client').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup/shutdown events
    """
    if settings.is_notion_configured():
        logger.info("✓ Notion database configured")
    else:
        logger.warning("NOTION_KEY or NOTION_DB_ID missing - load and sync will fail")

    yield


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Daily Habits API",
    version="0.1.0",
    lifespan=lifespan
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Attach permissive cross-origin headers to every response"""
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


# Register routes
app.include_router(health.router)
app.include_router(load.router)
app.include_router(sync.router)
