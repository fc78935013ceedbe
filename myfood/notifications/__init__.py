# -*- coding: utf-8 -*-
"""Transient notifications, including ones queued across a page navigation."""

from .display import ConsoleDisplay, NotificationDisplay
from .models import NotificationClass, NotificationEvent
from .queue import NotificationQueue
from .storage import KeyValueStorage, MemoryStorage, SqliteStorage

__all__ = [
    "ConsoleDisplay",
    "KeyValueStorage",
    "MemoryStorage",
    "NotificationClass",
    "NotificationDisplay",
    "NotificationEvent",
    "NotificationQueue",
    "SqliteStorage",
]
