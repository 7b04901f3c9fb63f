"""
Exception hierarchy for warehouse.

This module defines all public exceptions raised by the library.

Catch `WarehouseError` to handle every library failure, or `ReadError`
when only stock-reading failures matter.
"""


class WarehouseError(Exception):
    """
    Base exception for all warehouse errors.

    Example
    -------
    >>> try:
    ...     items = reader.get_all_stock()
    ... except WarehouseError:
    ...     handle_failure()
    """

    #: Error code for programmatic handling.
    code: str = "warehouse_error"

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "An unspecified warehouse error occurred."
        super().__init__(message)


class ReadError(WarehouseError):
    """
    Raised by a DatabaseReader when the initial stock cannot be read.

    Readers never return partial results: either every item is decoded or
    this exception is raised.

    Common causes
    -------------
    - The fixture file is missing or is not valid JSON
    - A stored record has an empty brand or a negative price
    - The database table does not exist or the connection failed
    """

    code: str = "read_error"
