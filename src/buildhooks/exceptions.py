"""Errors reported by hook providers and the trigger API client."""


class HookError(Exception):
    """Base class for errors a provider returns from a transform."""


class EmptyBodyError(HookError):
    """The webhook request carried no body, or an empty one."""

    def __init__(self) -> None:
        super().__init__("Failed to read content of request body: no or empty request body")


class PayloadDecodeError(HookError):
    """The webhook body is not valid JSON for the expected event shape."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse request body: {detail}")


class UnsupportedEventError(HookError):
    """The event type reached transform without a transformer for it."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"Unsupported GitHub Webhook event: {event_type}")


class TriggerAPIError(Exception):
    """The trigger API could not be reached."""
