"""Pydantic models for the GitHub webhook payloads we format.

Field names follow GitHub's payloads verbatim. Fields we never read are
ignored on validation.
"""

from pydantic import BaseModel, Field, field_validator


class Repository(BaseModel):
    """Repository the event happened in."""

    full_name: str


class GitUser(BaseModel):
    """Name/email pair used for pushers, commit authors and committers."""

    name: str = ""
    email: str = ""


class CommitSummary(BaseModel):
    """A single commit in a push payload."""

    id: str
    message: str = ""
    author: GitUser | None = None
    committer: GitUser | None = None

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0].rstrip("\r")


class PushEvent(BaseModel):
    """Payload of a ``push`` event."""

    ref: str
    pusher: GitUser
    repository: Repository
    commits: list[CommitSummary] = Field(default_factory=list)

    @property
    def branch(self) -> str:
        return self.ref.removeprefix("refs/heads/")

    @property
    def is_deletion(self) -> bool:
        return not self.commits

    def author_name(self, commit: CommitSummary) -> str:
        """Commit author's name, falling back to the pusher for reduced payloads."""
        if commit.author and commit.author.name:
            return commit.author.name
        return self.pusher.name


class IssueUser(BaseModel):
    login: str


class Issue(BaseModel):
    number: int
    title: str
    html_url: str
    body: str = ""
    user: IssueUser

    @field_validator("body", mode="before")
    @classmethod
    def _null_body(cls, value: str | None) -> str:
        # GitHub sends null for issues opened without a description
        return "" if value is None else value


class IssueEvent(BaseModel):
    """Payload of an ``issues`` event."""

    action: str
    issue: Issue
    repository: Repository
