"""Webhook event decoding, formatting and dispatch."""

from github_relay.events.errors import (
    DecodeError,
    RelayError,
    UnreportableActionError,
    UnsupportedEventTypeError,
)
from github_relay.events.formatters import (
    EventFormatter,
    IssueFormatter,
    PushFormatter,
    default_formatters,
)
from github_relay.events.router import DispatchOutcome, EventRouter

__all__ = [
    "DecodeError",
    "DispatchOutcome",
    "EventFormatter",
    "EventRouter",
    "IssueFormatter",
    "PushFormatter",
    "RelayError",
    "UnreportableActionError",
    "UnsupportedEventTypeError",
    "default_formatters",
]
