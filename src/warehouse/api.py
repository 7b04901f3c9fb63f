from __future__ import annotations

import logging
from typing import Iterable, Protocol

from .conf import MANAGER_EMAIL, MIN_STOCK_THRESHOLD
from .exceptions import ReadError
from .items import Item

logger = logging.getLogger(__name__)


class DatabaseReader(Protocol):
    """
    Protocol describing where the initial stock comes from.

    Implementations either return the full inventory or raise ReadError.
    They are never asked for partial results.
    """
    def get_all_stock(self) -> list[Item]: ...


class EmailNotifier(Protocol):
    """
    Protocol describing how low-stock notifications are sent.

    Fire-and-forget: there is no return value and delivery failures are
    not part of the contract.
    """
    def send_email(self, to: str) -> None: ...


class Warehouse:
    """
    In-memory stock of items with a minimum-stock notification.

    Use `create_warehouse` (or `Warehouse.create`) to build one from a
    DatabaseReader; it returns None instead of a half-initialised object
    when the stock cannot be read.

    Example
    -------
    >>> warehouse = create_warehouse(reader, notifier)
    >>> if warehouse is not None:
    ...     warehouse.add([Item("Toshiba", 199)])
    ...     warehouse.remove(2)
    """

    min_stock_threshold: int = MIN_STOCK_THRESHOLD
    manager_email: str = MANAGER_EMAIL

    def __init__(self, items: Iterable[Item], notifier: EmailNotifier) -> None:
        self._items: list[Item] = list(items)
        self._notifier = notifier

    @classmethod
    def create(cls, reader: DatabaseReader, notifier: EmailNotifier) -> Warehouse | None:
        """
        Build a warehouse from the reader's stock.

        Parameters
        ----------
        reader : DatabaseReader
            Queried exactly once, here.

        notifier : EmailNotifier
            Used by `remove` when stock drops below the threshold.

        Returns
        -------
        Warehouse | None
            None when the reader raised ReadError. The error is logged,
            not re-raised.
        """
        try:
            items = reader.get_all_stock()
        except ReadError as e:
            logger.warning(f"Could not read initial stock: {e}")
            return None

        return cls(items, notifier)

    @property
    def stock_count(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def add(self, new_items: Iterable[Item]) -> None:
        """Append items to the end of the stock, keeping their order."""
        new_items = list(new_items)
        self._items.extend(new_items)
        logger.debug(f"Added {len(new_items)} item(s), stock is now {self.stock_count}")

    def remove(self, count: int) -> None:
        """
        Remove `count` items from the end of the stock.

        Removing more than the current stock empties the warehouse instead
        of failing. After every call, if the stock is below the threshold
        the manager is emailed, even if an earlier call already did.
        """
        if count >= self.stock_count:
            self._items.clear()
        elif count > 0:
            del self._items[-count:]

        logger.debug(f"Removed up to {count} item(s), stock is now {self.stock_count}")

        if self.stock_count < self.min_stock_threshold:
            logger.info(
                f"Stock {self.stock_count} below minimum {self.min_stock_threshold}, "
                f"notifying {self.manager_email}"
            )
            self._notifier.send_email(self.manager_email)


def create_warehouse(reader: DatabaseReader, notifier: EmailNotifier) -> Warehouse | None:
    """Shortcut for `Warehouse.create`."""
    return Warehouse.create(reader, notifier)
