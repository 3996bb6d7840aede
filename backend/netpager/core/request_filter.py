"""Request Filter: keep records whose category is in a requested allow-listed set.

Invariants:
    - Pure: no IO, no logging, never mutates inputs, never raises
    - Requested values outside FILTERABLE_RESOURCE_TYPES are dropped from the request
    - Records whose own category is not allow-listed never match a non-empty filter
    - Empty/absent filter returns the input object itself (read-only to callers)
    - Output preserves input order

Design Decisions:
    - Category read through an accessor callback: the filter never knows the record shape
    - Sanitized filter keeps the caller's shape (scalar stays scalar, list stays list)
      so renderers can echo "Filtered by type: a, b" exactly as applied
"""

from enum import Enum
from typing import Sequence

from netpager.core.domain_types import (
    FILTERABLE_RESOURCE_TYPES,
    CategoryAccessor,
    RequestTypeSpec,
    T,
)

_FILTERABLE = frozenset(FILTERABLE_RESOURCE_TYPES)


def resource_type_of(record: object) -> str | None:
    """Default accessor: the record's `resource_type` attribute."""
    return getattr(record, "resource_type", None)


def _plain(value: str) -> str:
    return value.value if isinstance(value, Enum) else value


def is_filterable_resource_type(value: object) -> bool:
    return isinstance(value, str) and value in _FILTERABLE


def sanitize_request_type_filter(
    request_type: RequestTypeSpec | None,
) -> str | list[str] | None:
    """Drop unrecognized values. Returns None when nothing usable remains."""
    if request_type is None:
        return None
    if isinstance(request_type, str):
        return _plain(request_type) if is_filterable_resource_type(request_type) else None
    if not isinstance(request_type, (list, tuple)):
        return None

    sanitized: list[str] = []
    for value in request_type:
        if is_filterable_resource_type(value) and _plain(value) not in sanitized:
            sanitized.append(_plain(value))
    return sanitized or None


def _normalize(request_type: RequestTypeSpec | None) -> tuple[object, ...]:
    if request_type is None:
        return ()
    if isinstance(request_type, str):
        return (request_type,)
    if isinstance(request_type, (list, tuple, set, frozenset)):
        return tuple(request_type)
    return ()


def _matches(value: object, requested: frozenset) -> bool:
    return is_filterable_resource_type(value) and value in requested


def filter_requests(
    records: Sequence[T],
    request_type: RequestTypeSpec | None,
    category: CategoryAccessor = resource_type_of,
) -> Sequence[T]:
    """Return records whose category is in the requested allow-listed set.

    A filter that names only unrecognized values matches nothing; the listing
    service sanitizes first, so there the same filter means "no filter".
    """
    normalized = _normalize(request_type)
    if not normalized:
        return records

    requested = frozenset(
        _plain(v) for v in normalized if is_filterable_resource_type(v)
    )
    return tuple(
        record for record in records if _matches(category(record), requested)
    )
