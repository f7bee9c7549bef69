"""Single endpoint reverse proxy."""

import logging
from collections.abc import Awaitable, Callable
from urllib.parse import urlsplit, urlunsplit

import httpx
from starlette.requests import Request
from starlette.responses import Response

# Not forwarded in either direction
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailers",
        "transfer-encoding",
        "upgrade",
    }
)

logger = logging.getLogger(__name__)

ProxyHandler = Callable[[Request], Awaitable[Response]]


def join_query(target_query: str, request_query: str) -> str:
    """Append the incoming query string to the target's own query."""
    if not target_query or not request_query:
        return target_query + request_query
    return f"{target_query}&{request_query}"


def single_endpoint_reverse_proxy(
    target_url: str,
    request_body: bytes | None = None,
    request_headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> ProxyHandler:
    """
    Build a handler that forwards every request to one fixed endpoint.

    Scheme, host and path always come from target_url; the incoming query
    string is appended to the target's. The Host header is rewritten to the
    target host, and a request without a User-Agent is forwarded with an
    empty one instead of the client library default.

    If request_body is given it replaces the incoming body, and the
    request_headers overrides are applied on top of the incoming headers.
    Without a replacement body the overrides are ignored.
    """
    target = urlsplit(target_url)

    async def handler(request: Request) -> Response:
        # Pairs rather than a dict so repeated headers survive
        headers = [
            (key.lower(), value)
            for key, value in request.headers.items()
            if key.lower() not in HOP_BY_HOP_HEADERS
            and key.lower() not in ("host", "content-length")
        ]
        headers.append(("host", target.netloc))
        if not any(key == "user-agent" for key, _ in headers):
            headers.append(("user-agent", ""))

        if request_body is not None:
            content = request_body
            overrides = {key.lower(): value for key, value in (request_headers or {}).items()}
            headers = [(key, value) for key, value in headers if key not in overrides]
            headers.extend(overrides.items())
        else:
            content = await request.body()

        url = urlunsplit(
            (
                target.scheme,
                target.netloc,
                target.path,
                join_query(target.query, request.url.query),
                "",
            )
        )

        try:
            if client is not None:
                upstream = await client.request(
                    request.method, url, headers=headers, content=content
                )
            else:
                async with httpx.AsyncClient() as own_client:
                    upstream = await own_client.request(
                        request.method, url, headers=headers, content=content
                    )
        except httpx.HTTPError as e:
            logger.error(f"Proxy error forwarding to {url}: {e}")
            return Response(status_code=502)

        response = Response(content=upstream.content, status_code=upstream.status_code)
        # httpx has already decoded the body
        for key, value in upstream.headers.multi_items():
            if key.lower() not in HOP_BY_HOP_HEADERS and key.lower() not in (
                "content-encoding",
                "content-length",
            ):
                response.headers.append(key, value)
        return response

    return handler
