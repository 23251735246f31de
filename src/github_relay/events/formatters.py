"""Formatters turning webhook payloads into chat messages."""

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel, ValidationError

from github_relay.events.errors import DecodeError, UnreportableActionError
from github_relay.events.models import IssueEvent, PushEvent

logger = logging.getLogger(__name__)

PLATFORM_TAG = "*github*"
COMMIT_ID_LENGTH = 8


class EventFormatter(ABC):
    """
    Decode a payload for one event type and render it as a single message.

    Subclasses set ``event_type`` and ``model`` and implement ``render``.
    Override ``check`` to reject well-formed events that should not be
    announced.
    """

    event_type: str
    model: type[BaseModel]

    def format(self, raw_payload: bytes | str) -> str:
        """
        Turn a raw JSON payload into a chat message.

        Args:
            raw_payload: JSON-encoded webhook payload

        Returns:
            The rendered message

        Raises:
            DecodeError: The payload does not match ``model``
            UnreportableActionError: The event is not one we announce
        """
        event = self.decode(raw_payload)
        self.check(event)
        message = self.render(event)
        logger.debug(f"msg: {message}")
        return message

    def decode(self, raw_payload: bytes | str) -> BaseModel:
        try:
            return self.model.model_validate_json(raw_payload)
        except ValidationError as e:
            raise DecodeError(self.event_type, str(e)) from e

    def check(self, event: BaseModel) -> None:
        """Raise UnreportableActionError for events that should not be sent."""

    @abstractmethod
    def render(self, event: BaseModel) -> str:
        """Render a decoded event."""


class PushFormatter(EventFormatter):
    """Summarise a push, or announce a branch deletion when it has no commits."""

    event_type = "push"
    model = PushEvent

    def render(self, event: PushEvent) -> str:
        repo = event.repository.full_name
        pusher = event.pusher.name

        if event.is_deletion:
            return f"{PLATFORM_TAG} [{repo}] _{pusher}_ deleted branch `{event.branch}`"

        count = len(event.commits)
        noun = "commit" if count == 1 else "commits"
        lines = [f"{PLATFORM_TAG} [{repo}] _{pusher}_ pushed {count} {noun} to `{event.branch}`"]
        for commit in event.commits:
            # Short ids are used as-is
            short_id = commit.id[:COMMIT_ID_LENGTH]
            lines.append(f">`{short_id}` {commit.title} - {event.author_name(commit)}")
        return "\n".join(lines)


class IssueFormatter(EventFormatter):
    """Announce newly opened issues."""

    event_type = "issues"
    model = IssueEvent

    def check(self, event: IssueEvent) -> None:
        if event.action != "opened":
            raise UnreportableActionError(self.event_type, event.action)

    def render(self, event: IssueEvent) -> str:
        issue = event.issue
        repo = event.repository.full_name
        body = issue.body.replace("\r\n", "\n").replace("\n", "\n>")
        return "\n".join(
            [
                f"{PLATFORM_TAG} [{repo}] Issue created by _{issue.user.login}_",
                f">*[#{issue.number}] {issue.title}*",
                f">{issue.html_url}",
                f">{body}",
            ]
        )


def default_formatters() -> dict[str, EventFormatter]:
    """Formatters for every supported event type, keyed by X-GitHub-Event value."""
    formatters: list[EventFormatter] = [PushFormatter(), IssueFormatter()]
    return {formatter.event_type: formatter for formatter in formatters}
