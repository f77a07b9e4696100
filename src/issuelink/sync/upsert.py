"""Create or update a GitHub issue."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..github.errors import GitHubClientError
from ..models import CREATE_FIELDS, UPDATE_FIELDS, Issue, IssueRequest

if TYPE_CHECKING:
    from ..github.client import GitHubClient
    from ..github.identity import IdentityResolver

logger = logging.getLogger(__name__)


class UpsertEngine:
    """Sends an Issue to GitHub, creating it when it has no number yet.

    An issue with a number is patched in place; one without is created and
    picks up the number GitHub assigns.
    """

    def __init__(self, client: GitHubClient, identity: IdentityResolver) -> None:
        self._client = client
        self._identity = identity

    def resolve(self, issue: Issue) -> None:
        """Fill in owner and assignees from the authenticated user."""
        if not issue.owner:
            issue.owner = self._identity.get_user()
            logger.debug("Defaulted owner to %s", issue.owner)
        if issue.assign:
            issue.assignees = [self._identity.get_user()]

    def plan(self, issue: Issue) -> IssueRequest:
        """Resolve the issue and build the request that would sync it."""
        self.resolve(issue)
        if issue.number is not None:
            return IssueRequest(
                action="update",
                method="PATCH",
                path=issue.api_path,
                payload=issue.payload(UPDATE_FIELDS),
            )
        return IssueRequest(
            action="create",
            method="POST",
            path=issue.api_path,
            payload=issue.payload(CREATE_FIELDS),
        )

    def upsert(self, issue: Issue) -> Issue:
        """Create or update the issue on GitHub.

        Returns:
            The same issue, with its number set after a create

        Raises:
            GitHubClientError: The request failed; the issue number is untouched
        """
        request = self.plan(issue)
        response = self._client.request(request.method, request.path, request.payload)

        if request.action == "create":
            number = response.get("number") if isinstance(response, dict) else None
            if not isinstance(number, int):
                raise GitHubClientError(
                    f"Create response for {issue.repository} carried no issue number"
                )
            issue.set_number(number)
            logger.info("Created GitHub issue: %s", issue.issue_ref)
        else:
            logger.info("Updated GitHub issue: %s", issue.issue_ref)
        return issue
