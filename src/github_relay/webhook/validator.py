"""Verification of GitHub's X-Hub-Signature-256 header."""

import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="


def sign_payload(payload: bytes, secret: str) -> str:
    """Header value GitHub would send for ``payload`` signed with ``secret``."""
    digest = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_delivery(
    payload: bytes,
    signature: str | None,
    secret: str,
    event_type: str | None = None,
    delivery_id: str | None = None,
) -> bool:
    """
    Check that a delivery was signed with the shared webhook secret.

    Rejections are logged with the event type and X-GitHub-Delivery id so a
    dropped delivery can be found in GitHub's "Recent Deliveries" list.

    Args:
        payload: Raw request body, before any form decoding
        signature: X-Hub-Signature-256 header value
        secret: Secret configured on the GitHub hook
        event_type: X-GitHub-Event header value, for logging
        delivery_id: X-GitHub-Delivery header value, for logging
    """
    delivery = f"{event_type or 'unknown'} delivery {delivery_id or '<no id>'}"

    if not signature:
        logger.warning(f"Dropping {delivery}: no signature header")
        return False

    if not signature.startswith(SIGNATURE_PREFIX):
        logger.warning(f"Dropping {delivery}: signature is not {SIGNATURE_PREFIX}<hex>")
        return False

    if not hmac.compare_digest(sign_payload(payload, secret), signature):
        logger.warning(f"Dropping {delivery}: signature does not match payload")
        return False

    return True
