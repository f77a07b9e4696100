"""Credential providers for the GitHub client.

A credential is resolved on every request, so callback providers can hand out
rotated or lazily fetched tokens without rebuilding the client.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Callable
from typing import Protocol

from .errors import GitHubAuthError

logger = logging.getLogger(__name__)


class CredentialProvider(Protocol):
    """Anything that can produce an API token on demand."""

    def resolve(self) -> str: ...


class StaticCredential:
    """A literal token."""

    def __init__(self, token: str) -> None:
        self._token = token

    def resolve(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return "StaticCredential(token=***)"


class CallbackCredential:
    """A token produced by a zero-argument callable at request time."""

    def __init__(self, func: Callable[[], str]) -> None:
        self._func = func

    def resolve(self) -> str:
        return self._func()


def as_credential(source: str | Callable[[], str] | CredentialProvider) -> CredentialProvider:
    """Wrap a literal token or callable into a credential provider."""
    if isinstance(source, str):
        return StaticCredential(source)
    if hasattr(source, "resolve"):
        return source  # type: ignore[return-value]
    if callable(source):
        return CallbackCredential(source)
    raise TypeError(f"Unsupported credential source: {type(source).__name__}")


def token_from_environment() -> str:
    """Look up a GitHub token from the environment or the gh CLI.

    Tries in order:
    1. GITHUB_TOKEN environment variable
    2. gh auth token (if gh CLI is installed and authenticated)

    Raises:
        GitHubAuthError: If no token is available
    """
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        logger.debug("Using token from GITHUB_TOKEN environment variable")
        return token

    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            check=True,
        )
        token = result.stdout.strip()
        if token:
            logger.debug("Using token from gh CLI")
            return token
    except (subprocess.CalledProcessError, FileNotFoundError):
        logger.debug("gh CLI not available or not authenticated")

    raise GitHubAuthError(
        "No GitHub token found. Either:\n"
        "  - Set GITHUB_TOKEN environment variable\n"
        "  - Run 'gh auth login' to authenticate with GitHub CLI"
    )


def credential_from_environment() -> CredentialProvider:
    """Credential that reads GITHUB_TOKEN or `gh auth token` when a request is made."""
    return CallbackCredential(token_from_environment)
