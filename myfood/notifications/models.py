# -*- coding: utf-8 -*-
"""Notifications — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class NotificationClass(str, Enum):
    """Category tags; values are the alert styles they render with."""

    error = "danger"
    warning = "warning"
    info = "primary"


class NotificationEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(..., alias="cls", description="danger | warning | primary")
    message: str = Field(..., alias="msg")
    timestamp: int = Field(..., alias="ts", description="Epoch milliseconds")


NotificationEvents = TypeAdapter(List[NotificationEvent])


def dump_events(events: List[NotificationEvent]) -> str:
    return NotificationEvents.dump_json(events, by_alias=True).decode("utf-8")


def load_events(raw: str) -> List[NotificationEvent]:
    return NotificationEvents.validate_json(raw)
