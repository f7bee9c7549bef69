"""Tests for the trigger API client."""

import json

import httpx
import pytest

from buildhooks.exceptions import TriggerAPIError
from buildhooks.schemas import TriggerAPIParamsModel
from buildhooks.services.trigger_client import TriggerAPIClient, build_trigger_payload

PARAMS = TriggerAPIParamsModel(
    commit_hash="83b86e5f286f546dc5a4a58db66ceef44460c85e",
    commit_message="PR test",
    branch="master",
    pull_request_id=12,
)


def test_build_trigger_payload_omits_missing_pull_request_id():
    """Test push params are sent without a pull_request_id key."""
    params = TriggerAPIParamsModel(commit_hash="abc", commit_message="msg", branch="main")

    payload = build_trigger_payload("token", params)

    assert payload["build_params"] == {
        "commit_hash": "abc",
        "commit_message": "msg",
        "branch": "main",
    }
    assert payload["hook_info"] == {"type": "bitrise", "api_token": "token"}


async def test_trigger_build_relays_status_and_body():
    """Test non-2xx answers are returned rather than raised."""
    seen: list[httpx.Request] = []

    def handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(400, json={"status": "error", "message": "invalid token"})

    async with TriggerAPIClient(
        base_url="https://trigger.test",
        transport=httpx.MockTransport(handle),
    ) as client:
        response = await client.trigger_build("my-app", "token", PARAMS)

    assert response.status_code == 400
    assert response.body == {"status": "error", "message": "invalid token"}
    assert seen[0].url.path == "/app/my-app/build/start.json"
    assert json.loads(seen[0].content)["build_params"]["pull_request_id"] == 12


async def test_trigger_build_non_json_answer():
    """Test a plain text answer is wrapped in a message."""

    def handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    async with TriggerAPIClient(
        base_url="https://trigger.test",
        transport=httpx.MockTransport(handle),
    ) as client:
        response = await client.trigger_build("my-app", "token", PARAMS)

    assert response.status_code == 503
    assert response.body == {"message": "Service Unavailable"}


async def test_send_request_to_url_overrides_target():
    """Test trigger calls can be redirected for debugging."""
    seen: list[httpx.Request] = []

    def handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    async with TriggerAPIClient(
        base_url="https://trigger.test",
        send_request_to_url="https://requestbin.test/inspect",
        transport=httpx.MockTransport(handle),
    ) as client:
        await client.trigger_build("my-app", "token", PARAMS)

    assert seen[0].url == "https://requestbin.test/inspect"


async def test_transport_failure_raises_trigger_api_error():
    """Test connection errors surface as TriggerAPIError."""

    def handle(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with TriggerAPIClient(
        base_url="https://trigger.test",
        transport=httpx.MockTransport(handle),
    ) as client:
        with pytest.raises(TriggerAPIError, match="Failed to call the Trigger API"):
            await client.trigger_build("my-app", "token", PARAMS)


async def test_trigger_build_empty_reply():
    """Test a reply without content has no body."""

    def handle(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    async with TriggerAPIClient(
        base_url="https://trigger.test",
        transport=httpx.MockTransport(handle),
    ) as client:
        response = await client.trigger_build("my-app", "token", PARAMS)

    assert response.status_code == 204
    assert response.body is None
