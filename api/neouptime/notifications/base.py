"""Base notification provider interface and the shared webhook transport."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from neouptime.security import safe_http_client

logger = logging.getLogger(__name__)

OK_MSG = "Sent Successfully."


class NotificationProvider(ABC):
    """
    Common interface for all notification providers.
    Each provider turns a monitor event into its own payload and delivers it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def send(
        self,
        notification: Mapping[str, Any],
        msg: str,
        monitor: Optional[Mapping[str, Any]] = None,
        heartbeat: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Deliver one notification and return a success message, or raise NotificationError."""
        ...


async def post_json(url: str, payload: dict) -> None:
    """
    POST a JSON document to a webhook.

    Raises httpx.HTTPError on transport failures and non-2xx responses.
    """
    async with safe_http_client() as client:
        response = await client.post(url, json=payload)
        response.raise_for_status()
