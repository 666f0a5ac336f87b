"""
Utilities Package - Helper functions

This package contains:
- ids.py: Creation-ordered record identifiers
"""

from taskdesk.utils.ids import generate_id, ID_LENGTH

__all__ = ["generate_id", "ID_LENGTH"]
