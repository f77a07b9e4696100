"""Sync engine for pushing a local task file to a GitHub issue.

This module provides the IssueSyncEngine class which handles:
- Reading a task file into an Issue
- Creating the issue on GitHub, or updating it when the task is already linked
- Writing the issue reference (and a linked title) back to the task file

Nothing is written locally unless GitHub accepted the request, and write
failures after a successful request are raised, never swallowed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..models import IssueLinkConfig, SyncResult
from ..repositories import LocalItem, TaskFileItem
from .extractor import IssueExtractor
from .reconcile import Reconciler
from .upsert import UpsertEngine

if TYPE_CHECKING:
    from ..github.client import GitHubClient
    from ..github.identity import IdentityResolver

logger = logging.getLogger(__name__)


class IssueSyncEngine:
    """Push one local task at a time to GitHub.

    Handles the workflow of:
    1. Extracting an Issue from the task
    2. Creating or updating the issue on GitHub
    3. Recording the issue reference on the task so later runs update it
    """

    def __init__(
        self,
        config: IssueLinkConfig,
        client: GitHubClient,
        identity: IdentityResolver,
    ) -> None:
        self._config = config
        self._extractor = IssueExtractor(config)
        self._upsert = UpsertEngine(client, identity)
        self._reconciler = Reconciler(config)

    def open_item(self, path: Path) -> TaskFileItem:
        """Load a task file using the configured done states."""
        return TaskFileItem.open(path, self._config.done_states)

    def sync(self, item: LocalItem, dry_run: bool = False) -> SyncResult:
        """Sync a single task to GitHub.

        Args:
            item: The task to push
            dry_run: Resolve and plan the request without sending it or
                touching the task

        Returns:
            SyncResult with the final issue and what changed locally

        Raises:
            ExtractionError: Task properties are malformed
            GitHubClientError: GitHub rejected or never answered the request
            OSError: The task file could not be written back
        """
        issue = self._extractor.extract(item)

        if dry_run:
            request = self._upsert.plan(issue)
            logger.info("[DRY RUN] %s %s: %s", request.method, request.path, request.payload)
            return SyncResult(issue=issue, action=request.action, dry_run=True)

        action = "update" if issue.number is not None else "create"
        issue = self._upsert.upsert(issue)
        reconcile = self._reconciler.reconcile(issue, item)
        logger.info(
            "Synced %s (%s, ref_written=%s, linkified=%s)",
            issue.issue_ref,
            action,
            reconcile.ref_written,
            reconcile.linkified,
        )
        return SyncResult(issue=issue, action=action, reconcile=reconcile)

    def sync_file(self, path: Path, dry_run: bool = False) -> SyncResult:
        """Open a task file and sync it.

        Raises:
            ContextError: The path is not a valid task file
        """
        return self.sync(self.open_item(path), dry_run=dry_run)
