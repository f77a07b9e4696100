"""Push markdown task files to GitHub issues."""

__version__ = "0.1.0"
