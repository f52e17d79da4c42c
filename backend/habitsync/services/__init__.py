"""
Business logic services
"""
from . import habits

habit_service = habits

__all__ = [
    'habits',
    'habit_service'
]
