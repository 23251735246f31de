"""Incoming-webhook chat integration."""

import logging

import httpx

from github_relay.notifications.base import ChatSendError

logger = logging.getLogger(__name__)


class WebhookChatSender:
    """POST messages as JSON to a chat service's incoming webhook."""

    def __init__(
        self,
        url: str,
        channel: str = "github",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.channel = channel
        self.timeout = timeout
        self._transport = transport

    async def send(self, team: str, message: str) -> None:
        """Send a message to the webhook, raising ChatSendError on any HTTP failure."""
        payload = {"team": team, "channel": self.channel, "text": message}

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(self.url, json=payload, timeout=self.timeout)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise ChatSendError(f"chat webhook request failed: {e}") from e

        logger.info(f"Webhook message sent to {team}#{self.channel}")
