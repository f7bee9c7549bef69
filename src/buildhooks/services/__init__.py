"""Outbound service clients."""

from .trigger_client import TriggerAPIClient, TriggerResponse, build_trigger_payload

__all__ = [
    "TriggerAPIClient",
    "TriggerResponse",
    "build_trigger_payload",
]
