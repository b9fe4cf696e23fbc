"""Error types for notification delivery."""

import json
from typing import Optional

import httpx


class NotificationError(Exception):
    """Raised when a notification could not be delivered."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def translate_transport_error(error: Exception) -> NotificationError:
    """
    Normalize a transport failure into a NotificationError.

    The message is ``"Error: <error> "`` followed by the response body when the
    webhook answered with one. Callers raise the result ``from`` the original.
    """
    msg = f"Error: {error} "
    status_code = None

    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        status_code = response.status_code
        try:
            data = response.json()
        except ValueError:
            data = response.text
        # JSON objects and arrays are appended even when empty
        if isinstance(data, (dict, list)) or data:
            msg += data if isinstance(data, str) else json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    return NotificationError(msg, status_code=status_code)
