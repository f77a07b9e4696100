"""Local task storage."""

from .filesystem import TaskFileItem
from .protocol import LocalItem

__all__ = ["LocalItem", "TaskFileItem"]
