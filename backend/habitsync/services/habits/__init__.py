"""
Habits module - Today's habit entry and its Notion storage
"""
from . import codec
from . import repository
from . import service
from . import state

# Export commonly used functions for convenience
from .service import load_today, sync_entry
from .state import HabitState, progress_percent

__all__ = [
    # Modules
    'codec',
    'repository',
    'service',
    'state',

    # Service functions
    'load_today',
    'sync_entry',

    # Client state
    'HabitState',
    'progress_percent'
]
