"""Issue domain model."""

from typing import Any, Literal

from pydantic import BaseModel, Field

ISSUE_OPEN = "open"
ISSUE_CLOSED = "closed"

# Fields sent to GitHub, per operation. New issues are always open, so
# create never carries a state.
CREATE_FIELDS = ("title", "body", "milestone", "labels", "assignees")
UPDATE_FIELDS = ("title", "body", "state", "milestone", "labels", "assignees")


class Issue(BaseModel):
    """A GitHub issue as derived from a single local task file.

    Built fresh on every sync; only the issue reference and the linkified
    title survive between runs, as front matter on the task file.
    """

    owner: str | None = None  # Resolved to the authenticated user when unset
    repo: str = Field(..., min_length=1)
    number: int | None = None  # None until GitHub has assigned one
    title: str
    state: Literal["open", "closed"] = ISSUE_OPEN
    body: str = ""
    labels: set[str] = Field(default_factory=set)
    milestone: int | None = None  # Reserved, never populated from task files
    assign: bool = False
    assignees: list[str] | None = None

    @property
    def repository(self) -> str:
        """Full repository name (owner/repo)."""
        return f"{self.owner}/{self.repo}"

    @property
    def issue_ref(self) -> str:
        """Issue reference in owner/repo#number format."""
        return f"{self.owner}/{self.repo}#{self.number}"

    @property
    def api_path(self) -> str:
        """REST path of the issue collection, or of this issue once it has a number."""
        path = f"repos/{self.owner}/{self.repo}/issues"
        if self.number is not None:
            path = f"{path}/{self.number}"
        return path

    def html_url(self, host: str = "github.com") -> str:
        """Browser URL of the issue."""
        return f"https://{host}/{self.owner}/{self.repo}/issues/{self.number}"

    def set_number(self, number: int) -> None:
        """Record the GitHub assigned number; it never changes once set."""
        if self.number is not None and self.number != number:
            raise ValueError(
                f"Issue {self.issue_ref} already has a number, refusing to change it to {number}"
            )
        self.number = number

    def payload(self, fields: tuple[str, ...]) -> dict[str, Any]:
        """Build a request body from the named fields that are present.

        None values and empty collections are left out; labels are sent as a
        sorted list.
        """
        data: dict[str, Any] = {}
        for name in fields:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, (set, list)):
                if not value:
                    continue
                value = sorted(value) if isinstance(value, set) else list(value)
            data[name] = value
        return data
