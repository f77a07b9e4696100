"""Shared fixtures for issuelink tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from issuelink.github import GitHubClient, IdentityResolver
from issuelink.models import IssueLinkConfig


@pytest.fixture
def task_dir(tmp_path: Path) -> Path:
    """Create a temporary task directory."""
    task_root = tmp_path / ".tasks"
    task_root.mkdir()
    return task_root


@pytest.fixture
def config() -> IssueLinkConfig:
    """Default configuration."""
    return IssueLinkConfig.default()


@pytest.fixture
def client() -> MagicMock:
    """GitHub client stand-in: GET user answers octocat, writes answer #42."""
    client = MagicMock(spec=GitHubClient)
    client.get.return_value = {"login": "octocat"}
    client.request.return_value = {"number": 42}
    return client


@pytest.fixture
def identity(client: MagicMock) -> IdentityResolver:
    """Identity resolver backed by the mock client."""
    return IdentityResolver(client)
