"""Protocol for local items that can be synced to an issue."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LocalItem(Protocol):
    """Access to the properties of one local task.

    The sync core only talks to tasks through this interface, so it does not
    care how they are stored.
    """

    def get_property(self, key: str) -> Any:
        """Value of a task property, or None when absent."""
        ...

    def set_property(self, key: str, value: Any) -> None:
        """Set a task property and persist it."""
        ...

    def get_tags(self) -> list[str]:
        """Task tags."""
        ...

    def get_heading_text(self) -> str:
        """Raw task title as stored (may contain markdown links)."""
        ...

    def set_heading_text(self, text: str) -> None:
        """Replace the task title and persist it."""
        ...

    def is_done(self) -> bool:
        """Whether the task is in a terminal state."""
        ...

    def get_workflow_state(self) -> str | None:
        """Task state, or None when the task has none."""
        ...

    def get_content(self) -> str:
        """Body content of the task."""
        ...
