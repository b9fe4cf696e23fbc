"""Microsoft Teams notification provider."""

import logging
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from neouptime.notifications.base import OK_MSG, NotificationProvider, post_json
from neouptime.notifications.errors import NotificationError, translate_transport_error
from neouptime.schemas.notification import Heartbeat, Monitor, TeamsNotificationConfig
from neouptime.util import DOWN, UP

logger = logging.getLogger(__name__)

ACTIVITY_IMAGE = "https://raw.githubusercontent.com/tomtoe6600/uptime-kuma/master/public/icon.png"

# Placeholder left in the URL field of monitors created without one
EMPTY_URL = "https://"


def _is_status(status: Any, expected: int) -> bool:
    # bool is an int subclass; True/False must not pass for UP/DOWN
    return type(status) is int and status == expected


def status_message(status: Any, monitor_name: Optional[str]) -> str:
    """Headline for the card, derived from the monitor status."""
    if _is_status(status, DOWN):
        return f"🔴 Application [{monitor_name}] went down"
    if _is_status(status, UP):
        return f"✅ Application [{monitor_name}] is back online"
    return "Notification"


def theme_color(status: Any) -> str:
    """Card accent color in hex RGB."""
    if _is_status(status, DOWN):
        return "ff0000"
    if _is_status(status, UP):
        return "00e804"
    return "008cff"


def resolve_monitor_address(monitor: Monitor) -> Optional[Any]:
    """
    Pick the address field that identifies the monitor.

    "keywork" is matched verbatim; stored monitors use that spelling.
    """
    if monitor.type in ("http", "keywork"):
        return monitor.url
    if monitor.type == "docker":
        return monitor.docker_host
    return monitor.hostname


def build_payload(
    monitor_message: Optional[str],
    status: Any = None,
    monitor_name: Optional[str] = None,
    monitor_url: Optional[Any] = None,
) -> dict:
    """
    Build a MessageCard payload for a Teams incoming webhook.

    Facts are added only for values that are present; the URL fact is also
    skipped when it is the bare "https://" placeholder.
    """
    notification_message = status_message(status, monitor_name)

    facts = []
    if monitor_name:
        facts.append({"name": "Monitor", "value": monitor_name})
    if monitor_url and monitor_url != EMPTY_URL:
        facts.append({"name": "URL", "value": monitor_url})

    description = {"activityTitle": "**Description**"}
    if monitor_message is not None:
        description["text"] = monitor_message
    description["facts"] = facts

    return {
        "@context": "https://schema.org/extensions",
        "@type": "MessageCard",
        "themeColor": theme_color(status),
        "summary": notification_message,
        "sections": [
            {
                "activityImage": ACTIVITY_IMAGE,
                "activityTitle": "**NeoUptime**",
            },
            {
                "activityTitle": notification_message,
            },
            description,
        ],
    }


def _as_model(model, data):
    if data is None or isinstance(data, model):
        return data
    return model.model_validate(data)


class TeamsProvider(NotificationProvider):
    """Send monitor events to a Teams channel through an incoming webhook."""

    @property
    def name(self) -> str:
        return "teams"

    async def _send_notification(self, webhook_url: str, payload: dict) -> None:
        await post_json(webhook_url, payload)

    async def send(
        self,
        notification: Union[Mapping[str, Any], TeamsNotificationConfig],
        msg: str,
        monitor: Union[Mapping[str, Any], Monitor, None] = None,
        heartbeat: Union[Mapping[str, Any], Heartbeat, None] = None,
    ) -> str:
        try:
            config = _as_model(TeamsNotificationConfig, notification)

            if heartbeat is None:
                # General notification, e.g. a test message
                payload = build_payload(monitor_message=msg)
            else:
                if monitor is None:
                    raise NotificationError("Monitor details are required with a heartbeat")
                monitor = _as_model(Monitor, monitor)
                heartbeat = _as_model(Heartbeat, heartbeat)
                payload = build_payload(
                    monitor_message=heartbeat.msg,
                    status=heartbeat.status,
                    monitor_name=monitor.name,
                    monitor_url=resolve_monitor_address(monitor),
                )

            await self._send_notification(config.webhook_url, payload)
        except (httpx.HTTPError, httpx.InvalidURL, ValidationError) as e:
            logger.warning("Teams notification failed: %s", e)
            raise translate_transport_error(e) from e

        logger.debug("Teams notification sent")
        return OK_MSG
