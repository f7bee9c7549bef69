"""GitHub webhook signature verification."""

import hashlib
import hmac

SIGNATURE_HEADER = "X-Hub-Signature-256"


def verify_webhook_signature(payload: bytes, signature: str, secret: str) -> bool:
    """Verify a GitHub X-Hub-Signature-256 value against the raw body."""
    if not signature:
        return False

    expected = hmac.new(
        secret.encode(),
        payload,
        hashlib.sha256,
    ).hexdigest()

    return hmac.compare_digest(f"sha256={expected}", signature)
