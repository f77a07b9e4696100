"""End-to-end tests for IssueSyncEngine with a mocked GitHub."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from issuelink.errors import ContextError, ExtractionError
from issuelink.github import GitHubApiError, GitHubTransportError, IdentityResolver
from issuelink.models import IssueLinkConfig
from issuelink.repositories import TaskFileItem
from issuelink.sync import IssueExtractor, IssueSyncEngine


@pytest.fixture
def engine(config: IssueLinkConfig, client: MagicMock, identity: IdentityResolver):
    return IssueSyncEngine(config, client, identity)


def _write(task_dir: Path, front_matter: str, body: str = "Body") -> Path:
    path = task_dir / "task.md"
    path.write_text(f"---\n{front_matter}\n---\n{body}\n")
    return path


class TestSyncCreate:
    """First sync of a task creates the issue."""

    def test_new_task_creates_and_links(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """A repo-only task lands in the user's repo and records the reference."""
        path = _write(task_dir, "title: Fix login\ncategory: widgets")

        result = engine.sync_file(path)

        assert result.action == "create"
        assert result.issue_ref == "octocat/widgets#42"
        client.request.assert_called_once_with(
            "POST", "repos/octocat/widgets/issues", {"title": "Fix login", "body": "Body"}
        )
        item = TaskFileItem.open(path)
        assert item.get_property("issue") == "octocat/widgets#42"
        assert item.get_heading_text() == (
            "[Fix login](https://github.com/octocat/widgets/issues/42)"
        )

    def test_round_trip_recognises_linked_task(
        self, engine: IssueSyncEngine, config: IssueLinkConfig, task_dir: Path
    ):
        """Re-extracting after a sync yields the assigned number and same title."""
        path = _write(task_dir, "title: Fix login\ncategory: acme/widgets")
        engine.sync_file(path)

        issue = IssueExtractor(config).extract(TaskFileItem.open(path))

        assert issue.number == 42
        assert issue.issue_ref == "acme/widgets#42"
        assert issue.title == "Fix login"

    def test_second_sync_updates(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """Once linked, the next run PATCHes the same issue."""
        path = _write(task_dir, "title: Fix login\ncategory: acme/widgets")
        engine.sync_file(path)
        result = engine.sync_file(path)

        assert result.action == "update"
        method, api_path, payload = client.request.call_args.args
        assert (method, api_path) == ("PATCH", "repos/acme/widgets/issues/42")
        assert payload["title"] == "Fix login"
        assert result.reconcile is not None and result.reconcile.changed is False

    def test_bracketed_title_round_trip(
        self, engine: IssueSyncEngine, client: MagicMock, config: IssueLinkConfig, task_dir: Path
    ):
        """A title with brackets keeps its text across link and re-sync."""
        path = _write(task_dir, "title: '[WIP] Fix login'\ncategory: acme/widgets")
        engine.sync_file(path)

        item = TaskFileItem.open(path)
        assert item.get_heading_text() == (
            r"[\[WIP\] Fix login](https://github.com/acme/widgets/issues/42)"
        )
        assert IssueExtractor(config).extract(item).title == "[WIP] Fix login"

        result = engine.sync_file(path)

        assert result.action == "update"
        method, api_path, payload = client.request.call_args.args
        assert (method, api_path) == ("PATCH", "repos/acme/widgets/issues/42")
        assert payload["title"] == "[WIP] Fix login"
        assert result.reconcile is not None and result.reconcile.linkified is False


class TestSyncUpdate:
    """Tasks with a reference update their issue."""

    def test_done_task_closes_issue(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """A done task PATCHes its issue with state closed."""
        client.request.return_value = {"number": 7}
        path = _write(
            task_dir, "title: Fix login\nstate: done\ncategory: acme/widgets\nissue: acme/widgets#7"
        )

        result = engine.sync_file(path)

        method, api_path, payload = client.request.call_args.args
        assert method == "PATCH"
        assert api_path == "repos/acme/widgets/issues/7"
        assert payload["state"] == "closed"
        assert result.issue.number == 7


class TestSyncFailures:
    """Failures leave the task file alone."""

    def test_api_error_leaves_file_untouched(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """A 422 surfaces with its message and nothing is written locally."""
        client.request.side_effect = GitHubApiError(422, "Validation Failed")
        path = _write(task_dir, "title: Fix login\ncategory: acme/widgets")
        before = path.read_text()

        with pytest.raises(GitHubApiError) as exc_info:
            engine.sync_file(path)

        assert exc_info.value.status == 422
        assert exc_info.value.message == "Validation Failed"
        assert path.read_text() == before

    def test_transport_error_leaves_file_untouched(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """Timeouts abort the run without local changes."""
        client.request.side_effect = GitHubTransportError("timed out")
        path = _write(task_dir, "title: Fix login\ncategory: acme/widgets")
        before = path.read_text()

        with pytest.raises(GitHubTransportError):
            engine.sync_file(path)
        assert path.read_text() == before

    def test_missing_task_never_calls_github(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """No task, no network."""
        with pytest.raises(ContextError):
            engine.sync_file(task_dir / "missing.md")
        client.get.assert_not_called()
        client.request.assert_not_called()

    def test_malformed_category_never_calls_github(
        self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path
    ):
        """Extraction errors stop the run before any request."""
        path = _write(task_dir, "title: T\ncategory: a/b/c")
        with pytest.raises(ExtractionError):
            engine.sync_file(path)
        client.request.assert_not_called()


class TestSyncOptions:
    """Configuration driven behaviour."""

    def test_assign_policy(self, client: MagicMock, identity: IdentityResolver, task_dir: Path):
        """Tasks in an assign state get the user as sole assignee."""
        engine = IssueSyncEngine(IssueLinkConfig(assign=["in_progress"]), client, identity)
        path = _write(task_dir, "title: T\nstate: in_progress\ncategory: acme/widgets")

        engine.sync_file(path)

        assert client.request.call_args.args[2]["assignees"] == ["octocat"]

    def test_linkify_disabled(self, client: MagicMock, identity: IdentityResolver, task_dir: Path):
        """Without linkify only the reference is written."""
        engine = IssueSyncEngine(IssueLinkConfig(linkify=False), client, identity)
        path = _write(task_dir, "title: Fix login\ncategory: acme/widgets")

        engine.sync_file(path)

        item = TaskFileItem.open(path)
        assert item.get_heading_text() == "Fix login"
        assert item.get_property("issue") == "acme/widgets#42"

    def test_dry_run(self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path):
        """Dry runs send nothing and write nothing."""
        path = _write(task_dir, "title: Fix login\ncategory: acme/widgets")
        before = path.read_text()

        result = engine.sync_file(path, dry_run=True)

        assert result.dry_run is True
        assert result.action == "create"
        assert result.reconcile is None
        client.request.assert_not_called()
        assert path.read_text() == before

    def test_labels_from_tags(self, engine: IssueSyncEngine, client: MagicMock, task_dir: Path):
        """Tags become labels."""
        path = _write(task_dir, "title: T\ntags: [ui, bug]\ncategory: acme/widgets")
        engine.sync_file(path)
        assert client.request.call_args.args[2]["labels"] == ["bug", "ui"]
