"""Issue sync package."""

from .engine import IssueSyncEngine
from .exporter import EXPORTERS, export_body, negotiate_dialect
from .extractor import IssueExtractor, parse_category, parse_issue_ref, resolve_links
from .reconcile import Reconciler, format_link
from .upsert import UpsertEngine

__all__ = [
    "EXPORTERS",
    "IssueExtractor",
    "IssueSyncEngine",
    "Reconciler",
    "UpsertEngine",
    "export_body",
    "format_link",
    "negotiate_dialect",
    "parse_category",
    "parse_issue_ref",
    "resolve_links",
]
