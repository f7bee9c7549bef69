"""Webhook endpoints: provider selection, transform, build trigger."""

import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from ..config import settings
from ..exceptions import TriggerAPIError
from ..providers import HookProvider, find_provider, get_provider
from ..services.trigger_client import TriggerAPIClient
from ..utils.github_auth import SIGNATURE_HEADER, verify_webhook_signature

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/h", tags=["hooks"])

UNSUPPORTED_PROVIDER_MESSAGE = "Unsupported Webhook Type / Provider"


async def get_trigger_client() -> AsyncIterator[TriggerAPIClient]:
    """Yield a trigger API client for the duration of a request."""
    async with TriggerAPIClient() as client:
        yield client


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _skipped(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={"message": f"Acknowledged, but skipping. Reason: {reason}"},
    )


@router.post("/{service_id}/{app_slug}/{api_token}")
async def service_hook(
    service_id: str,
    app_slug: str,
    api_token: str,
    request: Request,
    trigger_client: TriggerAPIClient = Depends(get_trigger_client),
) -> Response:
    """Handle a webhook for an explicitly named provider."""
    provider = get_provider(service_id)
    if provider is None:
        logger.warning(f"No service found with ID: {service_id}")
        return _error(404, f"No service found with ID: {service_id}")

    return await _handle_hook(service_id, provider, app_slug, api_token, request, trigger_client)


@router.post("/{app_slug}/{api_token}")
async def detected_hook(
    app_slug: str,
    api_token: str,
    request: Request,
    trigger_client: TriggerAPIClient = Depends(get_trigger_client),
) -> Response:
    """Handle a webhook, picking the provider from its headers."""
    found = find_provider(request.headers)
    if found is None:
        logger.warning(f"No provider recognized the webhook for app {app_slug}")
        return _error(400, UNSUPPORTED_PROVIDER_MESSAGE)

    service_id, provider = found
    return await _handle_hook(service_id, provider, app_slug, api_token, request, trigger_client)


async def _handle_hook(
    service_id: str,
    provider: HookProvider,
    app_slug: str,
    api_token: str,
    request: Request,
    trigger_client: TriggerAPIClient,
) -> Response:
    """
    Run the two-phase provider contract and map the outcome to a response.

    - not this provider: 400
    - recognized but unsupported event: 200, skipped
    - bad signature (only when a secret is configured): 401
    - decode/transform error: 400
    - business rule skip: 200, skipped
    - success: the trigger API's own status and body
    """
    check = provider.hook_check(request.headers)
    if not check.is_supported_by_provider:
        logger.warning(f"{service_id}: request not supported by provider")
        return _error(400, UNSUPPORTED_PROVIDER_MESSAGE)

    if check.cant_transform_reason:
        logger.info(f"{service_id}: {check.cant_transform_reason}")
        return _skipped(check.cant_transform_reason)

    body = await request.body()

    if service_id == "github" and settings.github_webhook_secret:
        signature = request.headers.get(SIGNATURE_HEADER, "")
        if not verify_webhook_signature(body, signature, settings.github_webhook_secret):
            logger.warning(f"{service_id}: invalid webhook signature for app {app_slug}")
            return _error(401, "Invalid webhook signature")

    result = provider.transform(request.headers, body)

    if result.error is not None:
        logger.warning(f"{service_id}: failed to transform webhook: {result.error}")
        return _error(400, str(result.error))

    if result.should_skip:
        logger.info(f"{service_id}: skipping build: {result.skip_reason}")
        return _skipped(result.skip_reason or "")

    assert result.trigger_api_params is not None
    try:
        trigger_response = await trigger_client.trigger_build(
            app_slug, api_token, result.trigger_api_params
        )
    except TriggerAPIError as e:
        logger.error(f"{service_id}: {e}")
        return _error(502, str(e))

    if trigger_response.body is None or trigger_response.status_code in (204, 304):
        return Response(status_code=trigger_response.status_code)
    return JSONResponse(status_code=trigger_response.status_code, content=trigger_response.body)
