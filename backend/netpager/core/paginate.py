"""Paginator: positional cursor windowing over an in-memory sequence.

Invariants:
    - 0 <= start_index <= end_index <= total
    - len(items) == end_index - start_index
    - next_page_token present iff end_index < total
    - previous_page_token present iff start_index > 0
    - Never raises: bad sizes fall back to the default, bad tokens to the first page
    - Pure and idempotent: same inputs, same result

Design Decisions:
    - Tokens are str(offset), not signed envelopes: round-trip correctness only
    - Tokens stay valid under append-only growth, nothing stronger
    - No options at all bypasses size validation: unpaginated callers get everything
    - previous_page_token steps back by the CURRENT page size, even if the caller
      used a different size to reach start_index
    - default_page_size is a parameter, callers pass Settings.default_page_size
"""

import re
from dataclasses import dataclass
from typing import Generic, Sequence

from netpager.core.domain_types import DEFAULT_PAGE_SIZE, T

_LEADING_INTEGER = re.compile(r"^\s*[+-]?\d+")


@dataclass(frozen=True)
class PaginationOptions:
    """Caller-supplied paging request. Both None means no pagination."""
    page_size: int | None = None
    page_token: str | None = None

    @property
    def requests_pagination(self) -> bool:
        return self.page_size is not None or self.page_token is not None


@dataclass(frozen=True)
class PaginationResult(Generic[T]):
    """One page plus the cursors around it."""
    items: tuple[T, ...]
    start_index: int
    end_index: int
    total: int
    invalid_token: bool = False
    next_page_token: str | None = None
    previous_page_token: str | None = None


def resolve_page_size(
    page_size: object, total: int, default_page_size: int = DEFAULT_PAGE_SIZE,
) -> int:
    """Normalize a requested page size for a collection of `total` items."""
    if page_size is None:
        return total if total > 0 else default_page_size
    # bool is an int subclass; True is not a page size
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        return default_page_size
    return min(page_size, max(total, 1))


def parse_page_token(page_token: object) -> int | None:
    """Parse the leading base-10 integer of a token; trailing text is ignored.

    None when the token does not start with an integer.
    """
    if not isinstance(page_token, str):
        return None
    match = _LEADING_INTEGER.match(page_token)
    if match is None:
        return None
    return int(match.group())


def resolve_start_index(page_token: object, total: int) -> tuple[int, bool]:
    """Return (start_index, invalid_token) for a token against `total` items."""
    if page_token is None:
        return 0, False

    parsed = parse_page_token(page_token)
    if parsed is None or parsed < 0 or parsed >= total:
        return 0, True
    return parsed, False


def paginate(
    items: Sequence[T],
    options: PaginationOptions | None = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> PaginationResult[T]:
    """Cut one page out of `items`. Pure, never raises."""
    total = len(items)

    if options is None or not options.requests_pagination:
        return PaginationResult(
            items=tuple(items), start_index=0, end_index=total, total=total,
        )

    page_size = resolve_page_size(options.page_size, total, default_page_size)
    start_index, invalid_token = resolve_start_index(options.page_token, total)

    page = tuple(items[start_index:start_index + page_size])
    end_index = start_index + len(page)

    return PaginationResult(
        items=page,
        start_index=start_index,
        end_index=end_index,
        total=total,
        invalid_token=invalid_token,
        next_page_token=str(end_index) if end_index < total else None,
        previous_page_token=(
            str(max(start_index - page_size, 0)) if start_index > 0 else None
        ),
    )
