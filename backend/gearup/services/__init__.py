"""
Business logic services
"""
from . import habits
from . import mood
from . import progress
from . import scheduler
from . import notifications

__all__ = [
    'habits',
    'mood',
    'progress',
    'scheduler',
    'notifications'
]
