# -*- coding: utf-8 -*-
"""Page logic for the food list and food view pages.

Every `open()` is a page load: pending notifications from the previous page are
replayed before the page renders.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .food.client import FoodApiClient, FoodClientError
from .notifications.display import NotificationDisplay
from .notifications.models import NotificationClass
from .notifications.queue import NotificationQueue

logger = logging.getLogger(__name__)

LIST_PAGE = "list"
VIEW_PAGE = "view"

MSG_FOOD_DELETED = "Food was deleted"
MSG_UNDER_CONSTRUCTION = "Feature is under construction!"
MSG_CONFIRM_DELETE = "Delete food?"


class FoodApp:
    def __init__(
        self,
        client: FoodApiClient,
        queue: NotificationQueue,
        display: NotificationDisplay,
        *,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.client = client
        self.queue = queue
        self.display = display
        self.echo = echo
        self.current_page: Optional[str] = None

    def notify(self, category: NotificationClass, message: str) -> None:
        self.display.show(category.value, message)

    def open(self, page: str, key: Optional[str] = None) -> bool:
        """Load a page. Returns False when the page reported an error."""
        if page not in (LIST_PAGE, VIEW_PAGE):
            raise ValueError(f"unknown page: {page}")
        if page == VIEW_PAGE and not key:
            raise ValueError("food key is required for the view page")

        self.queue.replay_pending()
        self.current_page = page
        if page == LIST_PAGE:
            return self.render_list()
        return self.render_food(key)

    def render_list(self) -> bool:
        try:
            foods = self.client.list_foods()
        except FoodClientError as exc:
            self.notify(NotificationClass.error, str(exc))
            return False

        for food in foods:
            self.echo(f"{food.name}\t{food.brand}\t{food.cal100}\t{food.comment}\t/food/{food.key}")
        return True

    def render_food(self, key: str) -> bool:
        try:
            food = self.client.get_food(key)
        except FoodClientError as exc:
            self.echo("Food not loaded")
            self.notify(NotificationClass.error, str(exc))
            return False

        self.echo(f"Name: {food.name}")
        self.echo(f"Brand: {food.brand}")
        self.echo(f"Cal100: {food.cal100:.2f}")
        self.echo(f"P / F / C: {food.prot100:.2f} / {food.fat100:.2f} / {food.carb100:.2f}")
        self.echo(f"Comment: {food.comment}")
        return True

    def delete_food(self, key: str, confirm: Callable[[str], bool]) -> bool:
        if not confirm(MSG_CONFIRM_DELETE):
            return True

        try:
            self.client.delete_food(key)
        except FoodClientError as exc:
            self.notify(NotificationClass.error, str(exc))
            return False

        logger.info("food %s deleted", key)
        self.queue.enqueue(NotificationClass.info, MSG_FOOD_DELETED)
        return self.open(LIST_PAGE)

    def edit_food(self) -> None:
        self.notify(NotificationClass.warning, MSG_UNDER_CONSTRUCTION)
