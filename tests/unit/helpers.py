"""Payload builders and fakes shared by unit tests."""

import json
from typing import Any

from github_relay.notifications import ChatSendError


class RecordingSender:
    """Chat sender that records messages instead of sending them."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[tuple[str, str]] = []

    async def send(self, team: str, message: str) -> None:
        if self.fail:
            raise ChatSendError("backend unavailable")
        self.sent.append((team, message))


def make_push_payload(
    ref: str = "refs/heads/main",
    commits: list[dict[str, Any]] | None = None,
    repo: str = "acme/widget",
    pusher: str = "ana",
) -> dict[str, Any]:
    return {
        "ref": ref,
        "deleted": not commits,
        "pusher": {"name": pusher, "email": f"{pusher}@example.com"},
        "repository": {"full_name": repo, "name": repo.split("/")[-1]},
        "commits": commits or [],
    }


def make_commit(commit_id: str, message: str, author: str = "ana") -> dict[str, Any]:
    return {
        "id": commit_id,
        "message": message,
        "author": {"name": author, "email": f"{author}@example.com"},
        "committer": {"name": "GitHub", "email": "noreply@github.com"},
    }


def make_issue_payload(
    action: str = "opened",
    body: str | None = "Steps:\n1. Run\n2. Crash",
) -> dict[str, Any]:
    return {
        "action": action,
        "issue": {
            "html_url": "https://github.com/acme/widget/issues/42",
            "number": 42,
            "title": "Crash on startup",
            "body": body,
            "user": {"login": "bob", "id": 7},
        },
        "repository": {"full_name": "acme/widget"},
    }


def encode(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload).encode()
