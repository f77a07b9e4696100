"""Build an Issue from a local task.

Task properties used:
    title       heading, markdown links resolved to their text
    category    "owner/repo" or just "repo" (owner then defaults to the
                authenticated user)
    issue       "owner/repo#number" once the task has been synced
    state       done states close the issue
    tags        issue labels
"""

from __future__ import annotations

import logging
import re

from ..errors import ExtractionError
from ..models import ISSUE_CLOSED, ISSUE_OPEN, Issue, IssueLinkConfig
from ..repositories import LocalItem
from .exporter import export_body, negotiate_dialect

logger = logging.getLogger(__name__)

# [text](url), not preceded by "!" (images keep their markup). The text may
# contain backslash escaped characters such as \[ and \].
MARKDOWN_LINK_PATTERN = re.compile(r"(?<!!)\[(?P<text>(?:\\.|[^\]\\])*)\]\([^)]*\)")
ESCAPED_CHAR_PATTERN = re.compile(r"\\(.)")


def resolve_links(text: str) -> str:
    r"""Replace markdown inline links with their display text.

    Escaped characters in the link text are unescaped.

    Examples:
        >>> resolve_links("[Fix login](https://github.com/acme/web/issues/3)")
        'Fix login'
        >>> resolve_links(r"[\[WIP\] Fix login](https://github.com/acme/web/issues/3)")
        '[WIP] Fix login'
    """
    return MARKDOWN_LINK_PATTERN.sub(
        lambda m: ESCAPED_CHAR_PATTERN.sub(r"\1", m.group("text")), text
    ).strip()


def parse_category(label: object) -> tuple[str | None, str]:
    """Split a category label into (owner, repo).

    Examples:
        >>> parse_category("acme/widgets")
        ('acme', 'widgets')
        >>> parse_category("widgets")
        (None, 'widgets')

    Raises:
        ExtractionError: Missing label, empty segments or more than two segments
    """
    if not isinstance(label, str) or not label.strip():
        raise ExtractionError("Task has no category naming the target repository")

    parts = [part.strip() for part in label.strip().split("/")]
    if any(not part for part in parts):
        raise ExtractionError(f"Malformed category '{label}': empty owner or repository")
    if len(parts) == 1:
        return None, parts[0]
    if len(parts) == 2:
        return parts[0], parts[1]
    raise ExtractionError(f"Malformed category '{label}': expected 'owner/repo' or 'repo'")


def parse_issue_ref(ref: object) -> int | None:
    """Extract the issue number from an owner/repo#number reference.

    Examples:
        >>> parse_issue_ref("acme/widgets#7")
        7
        >>> parse_issue_ref(None) is None
        True

    Raises:
        ExtractionError: The reference has no number after '#'
    """
    if ref is None or (isinstance(ref, str) and not ref.strip()):
        return None

    _, sep, number = str(ref).rpartition("#")
    if not sep:
        raise ExtractionError(f"Malformed issue reference '{ref}': expected 'owner/repo#number'")
    try:
        return int(number)
    except ValueError as e:
        raise ExtractionError(f"Malformed issue reference '{ref}': '{number}' is not a number") from e


class IssueExtractor:
    """Reads a local task into a fresh Issue."""

    def __init__(self, config: IssueLinkConfig) -> None:
        self._config = config
        self._dialect = negotiate_dialect(config.dialects)

    @property
    def dialect(self) -> str:
        """Body export dialect in use."""
        return self._dialect

    def extract(self, item: LocalItem) -> Issue:
        """Build an Issue from the task's current properties.

        Raises:
            ExtractionError: Category or issue reference cannot be parsed
        """
        owner, repo = parse_category(item.get_property(self._config.category_property))
        number = parse_issue_ref(item.get_property(self._config.issue_property))

        title = resolve_links(item.get_heading_text())
        if not title:
            raise ExtractionError("Task title is empty")

        issue = Issue(
            owner=owner,
            repo=repo,
            number=number,
            title=title,
            state=ISSUE_CLOSED if item.is_done() else ISSUE_OPEN,
            body=export_body(item.get_content(), title, self._dialect),
            labels=set(item.get_tags()),
            assign=self._config.should_assign(item.get_workflow_state()),
        )
        logger.debug(
            "Extracted issue: repo=%s/%s number=%s state=%s labels=%s",
            owner or "(self)",
            repo,
            number,
            issue.state,
            sorted(issue.labels),
        )
        return issue
