"""
Library constants and Django-overridable defaults.
"""

from __future__ import annotations

from typing import Any

MIN_STOCK_THRESHOLD = 3
MANAGER_EMAIL = "manager@email.com"

DEFAULTS: dict[str, Any] = {
    "WAREHOUSE_STOCK_TABLE": "inventory_item",
    "WAREHOUSE_EMAIL_SUBJECT": "Low stock alert",
    "WAREHOUSE_EMAIL_MESSAGE": (
        "Warehouse stock dropped below the minimum of {threshold} items."
    ),
}


def get_setting(name: str) -> Any:
    """
    Return a Django setting, falling back to the library default.

    Works without Django being configured, so the core warehouse can be
    used (and tested) outside of a Django project.
    """
    from django.conf import settings

    if settings.configured:
        return getattr(settings, name, DEFAULTS[name])
    return DEFAULTS[name]
