"""Pydantic views of the monitor, heartbeat and notification config a provider receives."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Monitor(BaseModel):
    type: Optional[str] = Field(None, description="Monitor type: http, keywork, docker, port, ping, ...")
    name: Optional[str] = None
    url: Optional[str] = None
    docker_host: Optional[Any] = None
    hostname: Optional[str] = None

    model_config = {"extra": "ignore"}


class Heartbeat(BaseModel):
    status: Optional[Any] = Field(None, description="Monitor status constant (DOWN, UP, PENDING, MAINTENANCE)")
    msg: Optional[str] = None

    model_config = {"extra": "ignore"}


class TeamsNotificationConfig(BaseModel):
    webhook_url: str = Field(..., alias="webhookUrl", description="Incoming webhook URL of the Teams channel")

    model_config = {"extra": "ignore", "populate_by_name": True, "frozen": True}
