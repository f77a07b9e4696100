"""Exceptions raised while reading local task files."""


class IssueLinkError(Exception):
    """Base exception for issuelink errors."""

    pass


class ContextError(IssueLinkError):
    """No valid local task item to sync (missing file, not markdown, no title)."""

    pass


class ExtractionError(IssueLinkError):
    """Task file properties cannot be turned into an issue."""

    pass
