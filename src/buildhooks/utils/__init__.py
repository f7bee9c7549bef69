"""Utility modules."""

from .github_auth import SIGNATURE_HEADER, verify_webhook_signature
from .logging import setup_logging
from .proxy import join_query, single_endpoint_reverse_proxy

__all__ = [
    "SIGNATURE_HEADER",
    "join_query",
    "setup_logging",
    "single_endpoint_reverse_proxy",
    "verify_webhook_signature",
]
