"""Config validation for notification providers."""

from typing import Optional
from urllib.parse import urlparse


def validate_notification_config(provider_type: str, config: dict) -> Optional[str]:
    """
    Validate notification config for a given provider type.
    Returns None if valid, or an error message string if invalid.
    """
    validators = {
        "teams": _validate_teams,
    }
    validator = validators.get(provider_type)
    if not validator:
        return f"Unknown notification type: {provider_type}"
    return validator(config)


# --- Internal validators ---


def _validate_url(value, field_name: str) -> Optional[str]:
    if not isinstance(value, str) or not value:
        return f"Missing required field: {field_name}"
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https"):
        return f"{field_name} must use http or https protocol"
    return None


def _validate_teams(config: dict) -> Optional[str]:
    return _validate_url(config.get("webhookUrl"), "webhookUrl")
