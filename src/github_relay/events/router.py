"""Dispatch webhook deliveries to formatters and the chat sender."""

import logging
from enum import Enum

from github_relay.events.errors import (
    DecodeError,
    UnreportableActionError,
    UnsupportedEventTypeError,
)
from github_relay.events.formatters import EventFormatter, default_formatters
from github_relay.notifications import ChatSender, ChatSendError

logger = logging.getLogger(__name__)


class DispatchOutcome(str, Enum):
    """What happened to a single delivery."""

    SENT = "sent"
    NO_DESTINATION = "no_destination"
    UNSUPPORTED = "unsupported"
    DECODE_ERROR = "decode_error"
    UNREPORTABLE = "unreportable"
    SEND_FAILED = "send_failed"


class EventRouter:
    """
    Route a delivery to the formatter for its event type and send the result.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        sender: ChatSender,
        formatters: dict[str, EventFormatter] | None = None,
    ):
        self._sender = sender
        self._formatters = formatters if formatters is not None else default_formatters()

    @property
    def event_types(self) -> list[str]:
        return sorted(self._formatters)

    def formatter_for(self, event_type: str | None) -> EventFormatter:
        """
        Look up the formatter for an event type.

        Raises:
            UnsupportedEventTypeError: No formatter handles ``event_type``
        """
        formatter = self._formatters.get(event_type or "")
        if formatter is None:
            raise UnsupportedEventTypeError(event_type)
        return formatter

    async def dispatch(
        self,
        destination: str | None,
        event_type: str | None,
        raw_payload: bytes | str,
    ) -> DispatchOutcome:
        """
        Format a webhook delivery and send it to ``destination``.

        Failures are logged and reported through the returned outcome; nothing
        is raised and nothing is retried.

        Args:
            destination: Chat team to send the message to
            event_type: Value of the X-GitHub-Event header
            raw_payload: JSON-encoded event payload

        Returns:
            The outcome of the delivery
        """
        if not destination:
            logger.info("invalid request, no team name specified")
            return DispatchOutcome.NO_DESTINATION

        try:
            formatter = self.formatter_for(event_type)
            message = formatter.format(raw_payload)
        except UnsupportedEventTypeError as e:
            logger.warning(f"error handling hook event: {e}")
            return DispatchOutcome.UNSUPPORTED
        except DecodeError as e:
            logger.warning(f"error handling hook event: {e}")
            return DispatchOutcome.DECODE_ERROR
        except UnreportableActionError as e:
            logger.debug(f"ignoring hook event: {e}")
            return DispatchOutcome.UNREPORTABLE

        try:
            await self._sender.send(destination, message)
        except ChatSendError as e:
            logger.error(f"failed to send message to {destination}: {e}")
            return DispatchOutcome.SEND_FAILED

        logger.info(f"Sent {event_type} message to {destination}")
        return DispatchOutcome.SENT
