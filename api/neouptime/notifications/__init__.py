"""Notification provider layer."""

from neouptime.notifications.base import NotificationProvider
from neouptime.notifications.errors import NotificationError, translate_transport_error
from neouptime.notifications.resolver import available_providers, resolve_provider
from neouptime.notifications.teams import TeamsProvider
from neouptime.notifications.validate import validate_notification_config

__all__ = [
    "NotificationError",
    "NotificationProvider",
    "TeamsProvider",
    "available_providers",
    "resolve_provider",
    "translate_transport_error",
    "validate_notification_config",
]
