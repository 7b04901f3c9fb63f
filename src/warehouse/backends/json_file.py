from __future__ import annotations

import logging
import os
from pathlib import Path

from ..exceptions import ReadError
from ..items import Item, loads_items

logger = logging.getLogger(__name__)


class JsonFileDatabaseReader:
    """
    Reads the stock from a JSON fixture file.

    Expected format
    ---------------
    [{"brand": "Toshiba", "price": 199}, ...]

    The file is read on every call, so edits between calls are picked up.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def get_all_stock(self) -> list[Item]:
        """
        Raises
        ------
        ReadError
            If the file cannot be opened or its content cannot be decoded.
        """
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise ReadError(f"Cannot read stock file {self.path}: {e}") from e

        try:
            items = loads_items(data)
        except ValueError as e:
            raise ReadError(f"Invalid stock file {self.path}: {e}") from e

        logger.debug(f"Loaded {len(items)} item(s) from {self.path}")
        return items
