"""
API Package - Exports all API routers
"""

from taskdesk.api import auth, tasks, users

__all__ = ["auth", "tasks", "users"]
