"""Data models."""

from .config import DEFAULT_DONE_STATES, IssueLinkConfig
from .issue import (
    CREATE_FIELDS,
    ISSUE_CLOSED,
    ISSUE_OPEN,
    UPDATE_FIELDS,
    Issue,
)
from .sync import IssueRequest, ReconcileResult, SyncResult, UpsertAction

__all__ = [
    "CREATE_FIELDS",
    "DEFAULT_DONE_STATES",
    "ISSUE_CLOSED",
    "ISSUE_OPEN",
    "UPDATE_FIELDS",
    "Issue",
    "IssueLinkConfig",
    "IssueRequest",
    "ReconcileResult",
    "SyncResult",
    "UpsertAction",
]
