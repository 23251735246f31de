"""Relay GitHub webhook events to a chat team."""

__version__ = "0.1.0"
