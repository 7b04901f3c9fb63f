from __future__ import annotations

import logging
from decimal import Decimal

from django.db import DatabaseError, connections

from ..conf import get_setting
from ..exceptions import ReadError
from ..items import Item

logger = logging.getLogger(__name__)


class DjangoDatabaseReader:
    """
    Reads the stock from a database table through Django's connections.

    The table needs `brand` and `price` columns, which is what the
    `inventory.Item` example model provides. Rows are returned in primary
    key order so the warehouse sees items in insertion order.

    Configuration
    -------------
    table : str | None
        Table name. Defaults to the WAREHOUSE_STOCK_TABLE setting.

    using : str
        Database alias in settings.DATABASES.

    Notes
    -----
    Any DatabaseError (missing table, lost connection) and any row that
    does not decode into a valid Item is reported as ReadError. Nothing is
    returned unless every row is valid.
    """

    def __init__(self, table: str | None = None, using: str = "default") -> None:
        self.table = table or get_setting("WAREHOUSE_STOCK_TABLE")
        self.using = using

    def get_all_stock(self) -> list[Item]:
        connection = connections[self.using]
        table = connection.ops.quote_name(self.table)

        try:
            with connection.cursor() as cursor:
                cursor.execute(f"SELECT brand, price FROM {table} ORDER BY id;")
                rows = cursor.fetchall()
        except DatabaseError as e:
            raise ReadError(f"Cannot read stock from table '{self.table}': {e}") from e

        items = []
        for brand, price in rows:
            # DecimalField values come back as Decimal (or str on SQLite)
            if isinstance(price, (Decimal, str)):
                try:
                    price = float(price)
                except ValueError as e:
                    raise ReadError(f"Invalid price {price!r} in table '{self.table}'") from e
            try:
                items.append(Item(brand=brand, price=price))
            except ValueError as e:
                raise ReadError(f"Invalid row in table '{self.table}': {e}") from e

        logger.debug(f"Loaded {len(items)} item(s) from table '{self.table}'")
        return items
