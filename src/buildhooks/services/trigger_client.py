"""Async client for the build trigger API."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..config import settings
from ..exceptions import TriggerAPIError
from ..schemas.trigger import TriggerAPIParamsModel

logger = logging.getLogger(__name__)

TRIGGERED_BY = "buildhooks"


@dataclass
class TriggerResponse:
    """Status and decoded body returned by the trigger API."""

    status_code: int
    body: dict[str, Any] | None  # None when the reply has no content


def build_trigger_payload(api_token: str, params: TriggerAPIParamsModel) -> dict[str, Any]:
    """Wrap trigger params in the trigger API request envelope."""
    return {
        "hook_info": {"type": "bitrise", "api_token": api_token},
        "build_params": params.model_dump(exclude_none=True),
        "triggered_by": TRIGGERED_BY,
    }


class TriggerAPIClient:
    """Async trigger API client. One instance per request."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        send_request_to_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.trigger_api_url
        self.timeout = timeout if timeout is not None else settings.trigger_api_timeout_seconds
        self.send_request_to_url = send_request_to_url or settings.send_request_to_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TriggerAPIClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()

    def trigger_url(self, app_slug: str) -> str:
        if self.send_request_to_url:
            return self.send_request_to_url
        return f"/app/{app_slug}/build/start.json"

    async def trigger_build(
        self,
        app_slug: str,
        api_token: str,
        params: TriggerAPIParamsModel,
    ) -> TriggerResponse:
        """Start a build. Non-2xx answers are returned, not raised."""
        assert self._client is not None
        url = self.trigger_url(app_slug)
        logger.info(f"Triggering build for app {app_slug} on branch {params.branch} ({url})")

        try:
            response = await self._client.post(url, json=build_trigger_payload(api_token, params))
        except httpx.HTTPError as e:
            raise TriggerAPIError(f"Failed to call the Trigger API: {e}") from e

        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = {"message": response.text}

        if response.is_error:
            logger.warning(f"Trigger API returned {response.status_code} for app {app_slug}")

        return TriggerResponse(status_code=response.status_code, body=body)
