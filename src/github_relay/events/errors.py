"""Errors raised while turning a webhook delivery into a chat message."""


class RelayError(Exception):
    """Base class for event handling failures."""


class DecodeError(RelayError):
    """The payload does not match the shape expected for its event type."""

    def __init__(self, event_type: str, detail: str):
        self.event_type = event_type
        self.detail = detail
        super().__init__(f"could not decode {event_type} payload: {detail}")


class UnsupportedEventTypeError(RelayError):
    """No formatter is registered for the event type."""

    def __init__(self, event_type: str | None):
        self.event_type = event_type
        super().__init__(f"unknown event type: {event_type}")


class UnreportableActionError(RelayError):
    """A well-formed payload for an action that is not announced."""

    def __init__(self, event_type: str, action: str):
        self.event_type = event_type
        self.action = action
        super().__init__(f"not reporting {event_type} action: {action}")
