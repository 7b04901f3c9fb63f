from __future__ import annotations

from typing import Iterable

from ..items import Item


class InMemoryDatabaseReader:
    """Serves a fixed list of items. Each call returns a fresh copy."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items = list(items)

    def get_all_stock(self) -> list[Item]:
        return list(self._items)


class NullEmailNotifier:
    """Notifier that drops every email."""

    def send_email(self, to: str) -> None:
        pass
