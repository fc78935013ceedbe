# -*- coding: utf-8 -*-
"""Notification queue that survives a page navigation.

Events are appended to a JSON array stored under one key. The next page load
replays them: events younger than the freshness window are shown in the order
they were queued, older ones are dropped, and the key is removed either way.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError

from ..clock import Clock, system_clock
from .display import Category, NotificationDisplay, tag_value
from .models import NotificationEvent, dump_events, load_events
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

DEFAULT_KEY = "notifications"
FRESHNESS_WINDOW_MS = 10_000


class NotificationQueue:
    def __init__(
        self,
        storage: KeyValueStorage,
        display: NotificationDisplay,
        *,
        clock: Clock = system_clock,
        key: str = DEFAULT_KEY,
        freshness_window_ms: int = FRESHNESS_WINDOW_MS,
    ) -> None:
        self.storage = storage
        self.display = display
        self.clock = clock
        self.key = key
        self.freshness_window_ms = freshness_window_ms

    def _read(self) -> Optional[List[NotificationEvent]]:
        """Return the stored events, or None when the key is absent."""
        raw = self.storage.get(self.key)
        if raw is None:
            return None
        try:
            return load_events(raw)
        except ValidationError as exc:
            # Malformed value: treat as empty and purge it.
            logger.warning("Purging malformed notification queue %r: %s", self.key, exc)
            self.storage.remove(self.key)
            return []

    def pending(self) -> List[NotificationEvent]:
        """Return queued events without consuming them."""
        return self._read() or []

    def enqueue(self, category: Category, message: str) -> None:
        events = self._read() or []
        events.append(
            NotificationEvent(category=tag_value(category), message=message, timestamp=self.clock())
        )
        self.storage.set(self.key, dump_events(events))

    def replay_pending(self) -> int:
        """Show fresh queued events, then clear the queue. Returns the number shown."""
        events = self._read()
        if events is None:
            return 0

        now = self.clock()
        shown = 0
        for event in events:
            if now - event.timestamp > self.freshness_window_ms:
                logger.debug("Dropping stale notification (%d ms old)", now - event.timestamp)
                continue
            self.display.show(event.category, event.message)
            shown += 1

        self.storage.remove(self.key)
        return shown
