"""Resolve a notification provider by its configured type."""

from neouptime.notifications.base import NotificationProvider
from neouptime.notifications.teams import TeamsProvider

_PROVIDERS: dict[str, NotificationProvider] = {
    provider.name: provider
    for provider in (TeamsProvider(),)
}


def available_providers() -> list[str]:
    return sorted(_PROVIDERS)


def resolve_provider(provider_type: str) -> NotificationProvider:
    """Return the provider registered under ``provider_type``."""
    try:
        return _PROVIDERS[provider_type]
    except KeyError:
        raise ValueError(f"Unknown notification provider type: {provider_type}") from None
