"""Write sync results back to the local task."""

import logging
import re

from ..models import Issue, IssueLinkConfig, ReconcileResult
from ..repositories import LocalItem

logger = logging.getLogger(__name__)

# Characters that would end or confuse the text part of a markdown link
LINK_TEXT_SPECIALS = re.compile(r"([\\\[\]])")


def format_link(text: str, url: str) -> str:
    r"""Markdown inline link, with brackets and backslashes in the text escaped.

    Examples:
        >>> format_link("[WIP] Fix", "https://x")
        '[\\[WIP\\] Fix](https://x)'
    """
    escaped = LINK_TEXT_SPECIALS.sub(r"\\\1", text)
    return f"[{escaped}]({url})"


class Reconciler:
    """Records the issue reference on the task and optionally links its title."""

    def __init__(self, config: IssueLinkConfig) -> None:
        self._config = config

    def reconcile(self, issue: Issue, item: LocalItem) -> ReconcileResult:
        """Persist the issue reference and linkify the title.

        The title is only rewritten while it still reads exactly as the
        extracted title, so a title that already is a link, or that was
        edited by hand, is left alone. The check happens once, just before
        the write.
        """
        if issue.owner is None or issue.number is None:
            raise ValueError("Cannot reconcile an issue that has no owner or number")

        result = ReconcileResult(issue_ref=issue.issue_ref)

        key = self._config.issue_property
        if item.get_property(key) != issue.issue_ref:
            item.set_property(key, issue.issue_ref)
            result.ref_written = True
            logger.debug("Set %s: %s", key, issue.issue_ref)

        if self._config.linkify and item.get_heading_text() == issue.title:
            link = format_link(issue.title, issue.html_url(self._config.web_host))
            item.set_heading_text(link)
            result.linkified = True
            logger.debug("Linkified title: %s", link)

        return result
