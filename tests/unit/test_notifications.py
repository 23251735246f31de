"""Tests for chat senders."""

import asyncio
import json

import httpx
import pytest

from github_relay.config import Settings
from github_relay.notifications import (
    ChatSendError,
    KeybaseChatSender,
    WebhookChatSender,
    build_sender,
)


class FakeProcess:
    """Stand-in for an asyncio subprocess."""

    def __init__(self, returncode: int = 0, stdout: bytes = b'{"result": {}}', stderr: bytes = b""):
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr
        self.stdin_data: bytes | None = None

    async def communicate(self, input: bytes | None = None):
        self.stdin_data = input
        return self._stdout, self._stderr


@pytest.fixture
def fake_exec(monkeypatch: pytest.MonkeyPatch):
    """Replace subprocess creation and record the command line."""
    calls: dict = {}

    def install(process: FakeProcess):
        async def create_subprocess_exec(*args, **kwargs):
            calls["args"] = args
            calls["process"] = process
            return process

        monkeypatch.setattr(asyncio, "create_subprocess_exec", create_subprocess_exec)
        return calls

    return install


def test_keybase_sends_team_message(fake_exec):
    """Test the request written to keybase chat api."""
    calls = fake_exec(FakeProcess())
    sender = KeybaseChatSender("/usr/bin/keybase", channel="dev")

    asyncio.run(sender.send("acme", "hello"))

    assert calls["args"] == ("/usr/bin/keybase", "chat", "api")
    request = json.loads(calls["process"].stdin_data)
    assert request["method"] == "send"
    options = request["params"]["options"]
    assert options["channel"] == {"name": "acme", "members_type": "team", "topic_name": "dev"}
    assert options["message"] == {"body": "hello"}


def test_keybase_nonzero_exit(fake_exec):
    """Test that a failing keybase process raises ChatSendError."""
    fake_exec(FakeProcess(returncode=1, stdout=b"", stderr=b"not logged in"))

    with pytest.raises(ChatSendError, match="not logged in"):
        asyncio.run(KeybaseChatSender().send("acme", "hello"))


def test_keybase_api_error(fake_exec):
    """Test that an error reply from the chat API raises ChatSendError."""
    fake_exec(FakeProcess(stdout=b'{"error": {"code": 2623, "message": "team not found"}}'))

    with pytest.raises(ChatSendError, match="team not found"):
        asyncio.run(KeybaseChatSender().send("nope", "hello"))


def test_keybase_missing_executable(monkeypatch: pytest.MonkeyPatch):
    """Test that a missing keybase binary raises ChatSendError."""

    async def create_subprocess_exec(*args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(asyncio, "create_subprocess_exec", create_subprocess_exec)

    with pytest.raises(ChatSendError, match="could not run keybase"):
        asyncio.run(KeybaseChatSender().send("acme", "hello"))


def test_webhook_posts_message():
    """Test the JSON body posted to the chat webhook."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    sender = WebhookChatSender(
        "https://chat.example.com/hooks/abc",
        channel="dev",
        transport=httpx.MockTransport(handler),
    )

    asyncio.run(sender.send("acme", "hello"))

    assert len(requests) == 1
    assert str(requests[0].url) == "https://chat.example.com/hooks/abc"
    assert json.loads(requests[0].content) == {"team": "acme", "channel": "dev", "text": "hello"}


def test_webhook_http_error():
    """Test that HTTP error responses raise ChatSendError."""
    sender = WebhookChatSender(
        "https://chat.example.com/hooks/abc",
        transport=httpx.MockTransport(lambda request: httpx.Response(500)),
    )

    with pytest.raises(ChatSendError):
        asyncio.run(sender.send("acme", "hello"))


def test_build_sender_defaults_to_keybase():
    """Test that the keybase backend is used by default."""
    sender = build_sender(Settings(chat_channel="dev", keybase_command="kb"))

    assert isinstance(sender, KeybaseChatSender)
    assert sender.command == "kb"
    assert sender.channel == "dev"


def test_build_sender_webhook():
    """Test selecting the webhook backend."""
    settings = Settings(chat_backend="webhook", chat_webhook_url="https://chat.example.com/hook")

    sender = build_sender(settings)

    assert isinstance(sender, WebhookChatSender)
    assert sender.url == "https://chat.example.com/hook"


def test_build_sender_webhook_requires_url():
    """Test that the webhook backend needs a URL."""
    with pytest.raises(ValueError, match="CHAT_WEBHOOK_URL"):
        build_sender(Settings(chat_backend="webhook", chat_webhook_url=None))
