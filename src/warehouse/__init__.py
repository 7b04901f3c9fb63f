from .api import DatabaseReader, EmailNotifier, Warehouse, create_warehouse
from .exceptions import ReadError, WarehouseError
from .items import Item, load_items, loads_items

__all__ = [
    "Item",
    "Warehouse",
    "create_warehouse",
    "DatabaseReader",
    "EmailNotifier",
    "ReadError",
    "WarehouseError",
    "load_items",
    "loads_items",
]
