"""Push command for syncing a local task file to a GitHub issue."""

import logging
from pathlib import Path

from ..errors import ContextError, IssueLinkError
from ..github import (
    GitHubApiError,
    GitHubClient,
    GitHubClientError,
    IdentityResolver,
    credential_from_environment,
)
from ..models import IssueLinkConfig
from ..services import ConfigService
from ..sync import IssueSyncEngine
from .output import error, header, info, success, warning

logger = logging.getLogger(__name__)


def run_push(
    project_root: Path,
    task_file: Path,
    token: str | None = None,
    dry_run: bool = False,
    linkify: bool | None = None,
    assign: bool | None = None,
) -> int:
    """Create or update the GitHub issue for a task file.

    Args:
        project_root: Path to project root containing issuelink.yml
        task_file: Task file to push
        token: GitHub token (default: GITHUB_TOKEN or gh CLI)
        dry_run: Show the request without sending it
        linkify: Override the linkify setting from issuelink.yml
        assign: Override the assign setting from issuelink.yml

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    config_service = ConfigService(project_root)
    config = config_service.get_config()
    if config_service.has_config_error:
        warning(config_service.config_error or "Invalid configuration")
        warning("Falling back to default settings")

    config = _apply_overrides(config, linkify, assign)

    credential = token if token else credential_from_environment()

    try:
        with GitHubClient(credential, base_url=config.api_host, timeout=config.timeout) as client:
            engine = IssueSyncEngine(config, client, IdentityResolver(client))
            item = engine.open_item(task_file)
            header(f"{'[DRY RUN] ' if dry_run else ''}Pushing {task_file.name} to GitHub...")
            result = engine.sync(item, dry_run=dry_run)
    except ContextError as e:
        error(str(e))
        info("Pass the path of a markdown task file with a title in its front matter")
        return 1
    except GitHubApiError as e:
        error(f"GitHub rejected the request ({e.status}): {e.message}")
        return 1
    except (IssueLinkError, GitHubClientError) as e:
        error(str(e))
        return 1
    except OSError as e:
        # The issue exists on GitHub but the task file does not know about it yet
        error(f"Failed to update {task_file}: {e}")
        return 1

    issue = result.issue
    if result.dry_run:
        verb = "update" if result.action == "update" else "create an issue in"
        target = issue.issue_ref if result.action == "update" else issue.repository
        info(f"Would {verb} {target}")
        return 0

    if result.action == "create":
        success(f"Created: {issue.issue_ref}")
    else:
        success(f"Updated: {issue.issue_ref}")
    if result.reconcile is not None and result.reconcile.changed:
        info(f"Linked {task_file.name} to {issue.html_url(config.web_host)}")
    return 0


def _apply_overrides(
    config: IssueLinkConfig,
    linkify: bool | None,
    assign: bool | None,
) -> IssueLinkConfig:
    """Apply command line overrides on top of the file configuration."""
    update: dict = {}
    if linkify is not None:
        update["linkify"] = linkify
    if assign is not None:
        update["assign"] = assign
    if not update:
        return config
    return config.model_copy(update=update)
