"""Task files stored on the filesystem."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from ..errors import ContextError
from ..models import DEFAULT_DONE_STATES

logger = logging.getLogger(__name__)


class TaskFileItem:
    """
    A single task stored as a .md file with YAML front matter.

    Front matter keys are the task properties; ``title`` is the heading,
    ``state`` the workflow state and ``tags`` the tag list. Every setter
    writes the whole file back immediately.
    """

    def __init__(
        self,
        path: Path,
        post: frontmatter.Post,
        done_states: list[str] | None = None,
    ) -> None:
        self.path = path
        self._post = post
        self._done_states = set(done_states if done_states is not None else DEFAULT_DONE_STATES)

    @classmethod
    def open(cls, path: Path, done_states: list[str] | None = None) -> TaskFileItem:
        """Load a task file.

        Raises:
            ContextError: The path is not a readable markdown task with a title
        """
        if not path.is_file():
            raise ContextError(f"No task file at {path}")
        if path.suffix != ".md":
            raise ContextError(f"Not a markdown task file: {path}")

        try:
            post = frontmatter.load(path)  # pyrefly: ignore[bad-argument-type]
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ContextError(f"Cannot parse front matter of {path}: {e}") from e

        title = post.metadata.get("title")
        if not isinstance(title, str) or not title.strip():
            raise ContextError(f"Task file {path} has no title")

        return cls(path, post, done_states)

    # --- Properties ---

    def get_property(self, key: str) -> Any:
        return self._post.metadata.get(key)

    def set_property(self, key: str, value: Any) -> None:
        self._post.metadata[key] = value
        self.save()

    def get_tags(self) -> list[str]:
        tags = self._post.metadata.get("tags") or []
        if isinstance(tags, str):
            return [tags]
        return [str(tag) for tag in tags]

    def get_heading_text(self) -> str:
        return str(self._post.metadata.get("title", ""))

    def set_heading_text(self, text: str) -> None:
        self._post.metadata["title"] = text
        self.save()

    def is_done(self) -> bool:
        state = self.get_workflow_state()
        return state is not None and state in self._done_states

    def get_workflow_state(self) -> str | None:
        state = self._post.metadata.get("state")
        return str(state) if state is not None else None

    def get_content(self) -> str:
        return self._post.content

    # --- Persistence ---

    def save(self) -> None:
        """Write front matter and content back to disk.

        The file is replaced in one step so a crash never leaves it half
        written. The replacement keeps the original file mode.
        """
        # sort_keys=False preserves original key order
        text = frontmatter.dumps(self._post, sort_keys=False)
        if not text.endswith("\n"):
            text += "\n"

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved task file %s", self.path)
