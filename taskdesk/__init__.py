"""
TaskDesk - Task tracking backend

Usage:
    from taskdesk.models import Task
    from taskdesk.core.config import settings
"""

__version__ = "1.0.0"
