"""Chat notification backends."""

from github_relay.config import Settings
from github_relay.notifications.base import ChatSender, ChatSendError
from github_relay.notifications.keybase import KeybaseChatSender
from github_relay.notifications.webhook import WebhookChatSender


def build_sender(settings: Settings) -> ChatSender:
    """Create the chat sender selected by ``settings.chat_backend``."""
    if settings.chat_backend == "webhook":
        if not settings.chat_webhook_url:
            raise ValueError("CHAT_WEBHOOK_URL is required when CHAT_BACKEND is 'webhook'")
        return WebhookChatSender(settings.chat_webhook_url, channel=settings.chat_channel)
    return KeybaseChatSender(settings.keybase_command, channel=settings.chat_channel)


__all__ = [
    "ChatSendError",
    "ChatSender",
    "KeybaseChatSender",
    "WebhookChatSender",
    "build_sender",
]
