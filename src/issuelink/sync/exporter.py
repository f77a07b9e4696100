"""Markdown body exporters.

Task bodies are exported in one of two dialects: GitHub flavoured markdown
(``gfm``) when available, otherwise plain ``markdown``. Both drop the parts
of a task file that only make sense locally: a leading ``# heading`` that
repeats the task title and HTML comments.
"""

import re
from collections.abc import Callable

BASELINE_DIALECT = "markdown"

HTML_COMMENT_PATTERN = re.compile(r"<!--.*?-->\n?", re.DOTALL)
TASK_LIST_PATTERN = re.compile(r"^(?P<indent>\s*)(?P<bullet>[-*+])\s+\[[ xX]\]\s+", re.MULTILINE)
LEADING_HEADING_PATTERN = re.compile(r"\A\s*#\s+(?P<text>.+?)\s*#*\s*(?:\n|\Z)")

Exporter = Callable[[str, str], str]


def _strip_noise(content: str, title: str) -> str:
    """Remove HTML comments and a leading heading that repeats the title."""
    content = HTML_COMMENT_PATTERN.sub("", content)
    match = LEADING_HEADING_PATTERN.match(content)
    if match and match.group("text").strip() == title.strip():
        content = content[match.end() :]
    return content.strip()


def export_gfm(content: str, title: str) -> str:
    """Export a task body as GitHub flavoured markdown."""
    return _strip_noise(content, title)


def export_markdown(content: str, title: str) -> str:
    """Export a task body as plain markdown (task list checkboxes become bullets)."""
    content = _strip_noise(content, title)
    return TASK_LIST_PATTERN.sub(r"\g<indent>\g<bullet> ", content)


EXPORTERS: dict[str, Exporter] = {
    "gfm": export_gfm,
    BASELINE_DIALECT: export_markdown,
}


def negotiate_dialect(preferred: list[str] | tuple[str, ...]) -> str:
    """Pick the first preferred dialect with a registered exporter."""
    for dialect in preferred:
        if dialect in EXPORTERS:
            return dialect
    return BASELINE_DIALECT


def export_body(content: str, title: str, dialect: str) -> str:
    """Export a task body in the given dialect.

    Raises:
        KeyError: No exporter for the dialect
    """
    return EXPORTERS[dialect](content, title)
