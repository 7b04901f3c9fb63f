from .django_db import DjangoDatabaseReader
from .django_mail import DjangoEmailNotifier
from .json_file import JsonFileDatabaseReader
from .memory import InMemoryDatabaseReader, NullEmailNotifier

__all__ = [
    "DjangoDatabaseReader",
    "DjangoEmailNotifier",
    "JsonFileDatabaseReader",
    "InMemoryDatabaseReader",
    "NullEmailNotifier",
]
