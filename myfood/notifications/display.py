# -*- coding: utf-8 -*-
"""Notifications — display surfaces."""

from __future__ import annotations

from typing import Callable, Protocol, Union

from .models import NotificationClass

Category = Union[NotificationClass, str]


def tag_value(category: Category) -> str:
    if isinstance(category, NotificationClass):
        return category.value
    return str(category)


class NotificationDisplay(Protocol):
    def show(self, category: str, message: str) -> None: ...


class ConsoleDisplay:
    """Renders each notification as a one-line alert; the message is not escaped."""

    def __init__(self, echo: Callable[[str], None] = print) -> None:
        self._echo = echo

    def show(self, category: Category, message: str) -> None:
        self._echo(f"[{tag_value(category)}] {message}")
