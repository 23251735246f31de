"""Webhook handling for GitHub events."""

from github_relay.webhook.handler import router
from github_relay.webhook.validator import sign_payload, verify_delivery

__all__ = ["router", "sign_payload", "verify_delivery"]
