"""Authenticated account lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import GitHubClientError

if TYPE_CHECKING:
    from .client import GitHubClient

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Resolves and caches the login of the account behind the client's token.

    Build one per process or session and share it; the login is fetched on
    first use and kept for the resolver's lifetime. Concurrent first calls may
    each hit the API, which is harmless since the answer is the same.
    """

    def __init__(self, client: GitHubClient) -> None:
        self._client = client
        self._login: str | None = None

    def get_user(self) -> str:
        """Get authenticated GitHub username."""
        if self._login is not None:
            return self._login

        result = self._client.get("user")
        login = result.get("login") if isinstance(result, dict) else None
        if not isinstance(login, str) or not login:
            raise GitHubClientError("GitHub user response carried no login")
        self._login = login
        logger.debug("Current GitHub user: %s", self._login)
        return self._login
