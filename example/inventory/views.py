from __future__ import annotations

import functools

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from warehouse import Warehouse, create_warehouse, loads_items
from warehouse.backends import DjangoDatabaseReader, DjangoEmailNotifier

# One warehouse per process, built on first use from the database snapshot.
# A failed read is cached too, so it is never retried.
@functools.cache
def _get_warehouse() -> Warehouse | None:
    return create_warehouse(DjangoDatabaseReader(), DjangoEmailNotifier())


def _json(ok: bool, *, detail: str | None = None, status: int = 200) -> JsonResponse:
    """
    Small helper to keep responses consistent across endpoints.
    """
    warehouse = _get_warehouse()
    payload = {"ok": ok, "stock": warehouse.stock_count if warehouse else None}
    if detail:
        payload["detail"] = detail
    return JsonResponse(payload, status=status)


def unavailable() -> JsonResponse:
    return JsonResponse({"ok": False, "detail": "stock could not be loaded"}, status=503)


@require_GET
def stock(request: HttpRequest) -> HttpResponse:
    if _get_warehouse() is None:
        return unavailable()
    return _json(True)


@csrf_exempt  # demo-only: curl-friendly
@require_POST
def add(request: HttpRequest) -> HttpResponse:
    """
    Add items posted as `[{"brand": ..., "price": ...}, ...]`.
    """
    warehouse = _get_warehouse()
    if warehouse is None:
        return unavailable()

    try:
        items = loads_items(request.body)
    except ValueError as e:
        return _json(False, detail=str(e), status=400)

    warehouse.add(items)
    return _json(True)


@csrf_exempt  # demo-only: curl-friendly
@require_POST
def remove(request: HttpRequest, count: int) -> HttpResponse:
    """
    Remove `count` items. The manager is emailed when stock drops below 3.
    """
    warehouse = _get_warehouse()
    if warehouse is None:
        return unavailable()

    warehouse.remove(count)
    return _json(True)
