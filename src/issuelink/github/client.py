"""GitHub REST API client."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from ..logging import HTTP_LOGGERS, suppress_loggers
from .credentials import CredentialProvider, as_credential
from .errors import GitHubApiError, GitHubAuthError, GitHubTransportError

logger = logging.getLogger(__name__)

USER_AGENT = "issuelink"
ACCEPT = "application/vnd.github.v3+json"
DEFAULT_TIMEOUT = 30.0


class GitHubClient:
    """GitHub REST API client.

    Provides a thin wrapper around the GitHub REST API with:
    - Token authentication resolved per request (literal or callback)
    - Enterprise support via custom base_url
    - Typed errors for error statuses and transport failures
    """

    def __init__(
        self,
        credential: str | Callable[[], str] | CredentialProvider,
        base_url: str = "api.github.com",
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the GitHub client.

        Args:
            credential: Token string, zero-argument callable returning one,
                or a CredentialProvider
            base_url: API host (default: api.github.com, use custom for Enterprise)
            timeout: Request timeout in seconds
        """
        self.credential = as_credential(credential)
        self.base_url = base_url
        self._api_url = f"https://{base_url}"
        self._client = httpx.Client(
            base_url=self._api_url,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": ACCEPT,
            },
            timeout=timeout,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _auth_headers(self) -> dict[str, str]:
        token = self.credential.resolve()
        if not token:
            raise GitHubAuthError("Credential resolved to an empty token")
        return {"Authorization": f"Bearer {token}"}

    def request(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        """Send a REST request and return the decoded JSON response.

        Args:
            method: HTTP method (GET, POST, PATCH, ...)
            path: Path relative to the API root, e.g. "repos/acme/widgets/issues"
            body: JSON payload; omitted from the request entirely when None

        Returns:
            Parsed JSON response (empty dict for an empty response)

        Raises:
            GitHubAuthError: No token available
            GitHubApiError: Response status >= 400
            GitHubTransportError: Timeout or connection failure
        """
        method = method.upper()
        path = path.lstrip("/")
        kwargs: dict[str, Any] = {"headers": self._auth_headers()}
        if body is not None:
            kwargs["json"] = body

        logger.debug("%s %s: body=%s", method, path, body)

        start_time = time.monotonic()
        try:
            with suppress_loggers(*HTTP_LOGGERS):
                response = self._client.request(method, f"/{path}", **kwargs)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise GitHubTransportError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error(
                "%s %s: HTTP %d %s (%.0fms)",
                method,
                path,
                response.status_code,
                message,
                elapsed_ms,
            )
            raise GitHubApiError(response.status_code, message)

        logger.info("%s %s: %d (%.0fms)", method, path, response.status_code, elapsed_ms)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise GitHubTransportError(f"Invalid JSON response: {e}") from e

    def get(self, path: str) -> Any:
        """Send a GET request (never carries a body)."""
        return self.request("GET", path)

    def post(self, path: str, body: dict[str, Any]) -> Any:
        """Send a POST request with a JSON body."""
        return self.request("POST", path, body)

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        """Send a PATCH request with a JSON body."""
        return self.request("PATCH", path, body)


def _error_message(response: httpx.Response) -> str:
    """Server supplied `message` field, or "" when there is none."""
    try:
        data = response.json()
    except ValueError:
        return ""
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str):
            return message
    return ""
