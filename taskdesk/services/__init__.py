"""
Services Package - Credential store and task repository operations
"""

from taskdesk.services import credential_store, task_repository

__all__ = ["credential_store", "task_repository"]
