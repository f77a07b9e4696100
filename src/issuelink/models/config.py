"""Configuration model for issuelink.yml."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_DONE_STATES = ["done", "completed", "finished", "complete", "archived"]


class IssueLinkConfig(BaseModel):
    """Root configuration from issuelink.yml."""

    linkify: bool = Field(
        default=True,
        description="Rewrite the task title into a link to the issue after a sync",
    )
    assign: bool | list[str] = Field(
        default=False,
        description="Assignment policy: never, always, or a list of task states",
    )
    done_states: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DONE_STATES),
        description="Task states that close the issue",
    )
    category_property: str = Field(
        default="category", min_length=1, description="Front matter key naming owner/repo"
    )
    issue_property: str = Field(
        default="issue", min_length=1, description="Front matter key storing owner/repo#number"
    )
    api_host: str = Field(default="api.github.com", description="REST API host")
    web_host: str = Field(default="github.com", description="Host used for issue links")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    dialects: list[str] = Field(
        default_factory=lambda: ["gfm", "markdown"],
        description="Body export dialects in order of preference",
    )

    @field_validator("assign", mode="before")
    @classmethod
    def validate_assign(cls, v: object) -> object:
        """Accept the never/always keywords alongside booleans and state lists."""
        if isinstance(v, str):
            keyword = v.strip().lower()
            if keyword == "never":
                return False
            if keyword == "always":
                return True
            # A single state name
            return [v]
        return v

    @field_validator("done_states")
    @classmethod
    def validate_done_states(cls, v: list[str]) -> list[str]:
        """Validate that done states are non-empty strings."""
        for state in v:
            if not state:
                raise ValueError("Done state cannot be empty")
        return v

    def should_assign(self, workflow_state: str | None) -> bool:
        """Whether a task in this state gets the authenticated user as assignee."""
        if isinstance(self.assign, bool):
            return self.assign
        return workflow_state is not None and workflow_state in self.assign

    @classmethod
    def default(cls) -> "IssueLinkConfig":
        """Return default configuration."""
        return cls()
