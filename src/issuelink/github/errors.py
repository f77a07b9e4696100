"""GitHub client exceptions."""


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubAuthError(GitHubClientError):
    """No usable token could be resolved."""

    pass


class GitHubTransportError(GitHubClientError):
    """The request never produced a response (timeout, connection failure)."""

    pass


class GitHubApiError(GitHubClientError):
    """GitHub answered with an error status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"HTTP {status}: {message}" if message else f"HTTP {status}")
        self.status = status
        self.message = message
