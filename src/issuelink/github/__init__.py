"""GitHub REST access: client, credentials and identity lookup."""

from .client import GitHubClient
from .credentials import (
    CallbackCredential,
    CredentialProvider,
    StaticCredential,
    credential_from_environment,
)
from .errors import GitHubApiError, GitHubAuthError, GitHubClientError, GitHubTransportError
from .identity import IdentityResolver

__all__ = [
    "CallbackCredential",
    "CredentialProvider",
    "GitHubApiError",
    "GitHubAuthError",
    "GitHubClient",
    "GitHubClientError",
    "GitHubTransportError",
    "IdentityResolver",
    "StaticCredential",
    "credential_from_environment",
]
