"""
Health Routes - Health check endpoints
"""
from fastapi import APIRouter

from habitsync.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "Server is alive",
        "notion_configured": settings.is_notion_configured()
    }
