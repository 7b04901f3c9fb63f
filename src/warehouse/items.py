from __future__ import annotations

import json
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class Item:
    """
    A single product held in the warehouse.

    Items are immutable; the warehouse only ever appends or drops them.
    """
    brand: str
    price: float

    def __post_init__(self) -> None:
        if not isinstance(self.brand, str) or not self.brand:
            raise ValueError(f"Item brand must be a non-empty string, got {self.brand!r}")
        # bool is a Real subclass but never a price
        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise ValueError(f"Item price must be a number, got {self.price!r}")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"Item price must be a finite number >= 0, got {self.price!r}")

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Item:
        """
        Decode one `{"brand": str, "price": number}` record.

        Raises
        ------
        ValueError
            If the record is not a mapping, misses a field, or holds
            invalid values.
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"Item record must be an object, got {type(record).__name__}")

        try:
            brand = record["brand"]
            price = record["price"]
        except KeyError as e:
            raise ValueError(f"Item record is missing field {e.args[0]!r}") from e

        return cls(brand=brand, price=price)

    def to_dict(self) -> dict[str, Any]:
        return {"brand": self.brand, "price": self.price}


def load_items(records: Iterable[Any]) -> list[Item]:
    """Decode a sequence of records, failing on the first invalid one."""
    items = []
    for index, record in enumerate(records):
        try:
            items.append(Item.from_dict(record))
        except ValueError as e:
            raise ValueError(f"Invalid item at index {index}: {e}") from e
    return items


def loads_items(text: str | bytes) -> list[Item]:
    """
    Decode the fixture format: a JSON array of `{brand, price}` objects.

    Example
    -------
    >>> loads_items('[{"brand": "Toshiba", "price": 199}]')
    [Item(brand='Toshiba', price=199)]
    """
    # catches UnicodeDecodeError as well as JSONDecodeError
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ValueError(f"Stock data is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Stock data must be a JSON array, got {type(data).__name__}")

    return load_items(data)
