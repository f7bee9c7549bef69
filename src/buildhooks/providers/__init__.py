"""Registered hook providers, keyed by service id."""

from collections.abc import Mapping

from .base import HookProvider, decode_json_body, get_header
from .github import GitHubHookProvider

PROVIDERS: dict[str, HookProvider] = {
    "github": GitHubHookProvider(),
}


def get_provider(service_id: str) -> HookProvider | None:
    """Look up a provider by the service id used in hook URLs."""
    return PROVIDERS.get(service_id)


def find_provider(headers: Mapping[str, str]) -> tuple[str, HookProvider] | None:
    """Return the first provider whose header check accepts the request."""
    for service_id, provider in PROVIDERS.items():
        if provider.hook_check(headers).is_supported_by_provider:
            return service_id, provider
    return None


__all__ = [
    "GitHubHookProvider",
    "HookProvider",
    "PROVIDERS",
    "decode_json_body",
    "find_provider",
    "get_header",
    "get_provider",
]
