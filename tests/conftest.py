"""Pytest configuration and fixtures."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from buildhooks.api.hooks import get_trigger_client
from buildhooks.main import app
from buildhooks.providers import GitHubHookProvider
from buildhooks.services.trigger_client import TriggerAPIClient

COMMIT_HASH = "83b86e5f286f546dc5a4a58db66ceef44460c85e"

SAMPLE_CODE_PUSH_DATA = {
    "ref": "refs/heads/master",
    "deleted": False,
    "head_commit": {
        "distinct": True,
        "id": COMMIT_HASH,
        "message": "re-structuring Hook Providers, with added tests",
    },
}

SAMPLE_PULL_REQUEST_DATA = {
    "action": "opened",
    "number": 12,
    "pull_request": {
        "head": {
            "ref": "master",
            "sha": COMMIT_HASH,
        },
        "title": "PR test",
        "body": "PR text body",
        "merged": False,
        "mergeable": True,
    },
}


@pytest.fixture
def provider() -> GitHubHookProvider:
    return GitHubHookProvider()


@pytest.fixture
def code_push_body() -> bytes:
    return json.dumps(SAMPLE_CODE_PUSH_DATA).encode()


@pytest.fixture
def pull_request_body() -> bytes:
    return json.dumps(SAMPLE_PULL_REQUEST_DATA).encode()


@pytest.fixture
def trigger_requests() -> list[httpx.Request]:
    """Requests the fake trigger API received."""
    return []


@pytest.fixture
def client(trigger_requests):
    """Test client whose trigger API calls go to an in-memory fake."""

    def handle(request: httpx.Request) -> httpx.Response:
        trigger_requests.append(request)
        return httpx.Response(201, json={"status": "ok", "message": "triggered build"})

    async def fake_trigger_client():
        async with TriggerAPIClient(
            base_url="https://trigger.test",
            transport=httpx.MockTransport(handle),
        ) as trigger_client:
            yield trigger_client

    app.dependency_overrides[get_trigger_client] = fake_trigger_client
    yield TestClient(app)
    app.dependency_overrides.clear()
