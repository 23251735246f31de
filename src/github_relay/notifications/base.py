"""Chat sending capability shared by all backends."""

from typing import Protocol


class ChatSendError(Exception):
    """The chat backend did not accept a message."""


class ChatSender(Protocol):
    """Something that can post a text message to a chat team."""

    async def send(self, team: str, message: str) -> None:
        """Send ``message`` to ``team``, raising ChatSendError on failure."""
        ...
