# -*- coding: utf-8 -*-
"""
Command line client for the food tracker.

Each command is one page load: notifications queued by the previous command
are shown first.

Usage:
    python -m myfood.cli list
    python -m myfood.cli view <key>
    python -m myfood.cli edit <key>
    python -m myfood.cli delete <key> [--yes]
    python -m myfood.cli notifications
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import httpx

from .app import LIST_PAGE, VIEW_PAGE, FoodApp
from .config import settings
from .food.client import FoodApiClient
from .notifications.display import ConsoleDisplay
from .notifications.queue import NotificationQueue
from .notifications.storage import SqliteStorage


def storage_origin(api_url: str) -> str:
    """scheme://host[:port] of the API URL; path and trailing slash are ignored."""
    url = httpx.URL(api_url)
    return f"{url.scheme}://{url.netloc.decode('ascii')}"


def log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def build_app(args: argparse.Namespace, http: Optional[httpx.Client] = None) -> FoodApp:
    api_url = args.api_url or settings.api_base_url
    storage_path = Path(args.storage_path) if args.storage_path else settings.storage_path

    display = ConsoleDisplay()
    queue = NotificationQueue(
        SqliteStorage(storage_path, origin=storage_origin(api_url)),
        display,
        key=settings.notification_key,
        freshness_window_ms=settings.notification_ttl_ms,
    )
    client = FoodApiClient(api_url, http=http)
    return FoodApp(client, queue, display)


def _confirm(prompt: str) -> bool:
    return input(f"{prompt} [y/N] ").strip().lower() == "y"


def cmd_list(app: FoodApp, args: argparse.Namespace) -> int:
    return 0 if app.open(LIST_PAGE) else 1


def cmd_view(app: FoodApp, args: argparse.Namespace) -> int:
    return 0 if app.open(VIEW_PAGE, args.key) else 1


def cmd_edit(app: FoodApp, args: argparse.Namespace) -> int:
    if not app.open(VIEW_PAGE, args.key):
        return 1
    app.edit_food()
    return 0


def cmd_delete(app: FoodApp, args: argparse.Namespace) -> int:
    if not app.open(VIEW_PAGE, args.key):
        return 1
    confirm = (lambda _prompt: True) if args.yes else _confirm
    return 0 if app.delete_food(args.key, confirm) else 1


def cmd_notifications(app: FoodApp, args: argparse.Namespace) -> int:
    """List queued notifications without consuming them."""
    events = app.queue.pending()
    if not events:
        print("No pending notifications.")
        return 0
    for event in events:
        print(f"{event.timestamp}\t[{event.category}] {event.message}")
    return 0


def main(argv: Optional[List[str]] = None, *, http: Optional[httpx.Client] = None) -> int:
    parser = argparse.ArgumentParser(
        description="myfood client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--api-url", help=f"API base URL (default: {settings.api_base_url})")
    parser.add_argument(
        "--storage-path",
        help=f"Local storage database (default: {settings.storage_path})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("list", help="Show the food list")

    view_parser = subparsers.add_parser("view", help="Show one food")
    view_parser.add_argument("key", help="Food key")

    edit_parser = subparsers.add_parser("edit", help="Edit one food")
    edit_parser.add_argument("key", help="Food key")

    delete_parser = subparsers.add_parser("delete", help="Delete one food")
    delete_parser.add_argument("key", help="Food key")
    delete_parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip confirmation",
    )

    subparsers.add_parser("notifications", help="Show queued notifications")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=log_level(settings.log_level), format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "list": cmd_list,
        "view": cmd_view,
        "edit": cmd_edit,
        "delete": cmd_delete,
        "notifications": cmd_notifications,
    }

    app = build_app(args, http=http)
    try:
        return commands[args.command](app, args)
    finally:
        app.client.close()


if __name__ == "__main__":
    sys.exit(main())
