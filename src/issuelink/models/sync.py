"""Sync-related data models."""

from dataclasses import dataclass, field
from typing import Any, Literal

from .issue import Issue

UpsertAction = Literal["create", "update"]


@dataclass
class IssueRequest:
    """A planned create or update call."""

    action: UpsertAction
    method: str  # "POST" or "PATCH"
    path: str  # repos/{owner}/{repo}/issues[/{number}]
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass
class ReconcileResult:
    """What reconciliation changed on the task file."""

    issue_ref: str  # owner/repo#N
    ref_written: bool = False  # Issue property was missing or stale
    linkified: bool = False  # Title was rewritten into a link

    @property
    def changed(self) -> bool:
        """Whether anything was written to the task file."""
        return self.ref_written or self.linkified


@dataclass
class SyncResult:
    """Result of syncing one task file."""

    issue: Issue
    action: UpsertAction
    reconcile: ReconcileResult | None = None
    dry_run: bool = False

    @property
    def issue_ref(self) -> str:
        """Issue reference in owner/repo#number format."""
        return self.issue.issue_ref
