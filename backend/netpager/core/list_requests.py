"""Listing Service: sanitize filter, filter, then paginate the filtered view.

Invariants:
    - total is the POST-filter count; tokens are offsets into the filtered view
    - applied_request_type echoes the sanitized filter actually used (None = no filter)
    - A filter whose every value is unrecognized sanitizes to None: no filtering
    - Raw collection is never mutated or retained

Design Decisions:
    - Sanitize before filtering so the echoed filter and the applied one never differ
    - NetworkRequestsListing extends PaginationResult rather than wrapping it:
      renderers read one flat object (ADR: presentation reads, never recomputes)
"""

from dataclasses import dataclass
from typing import Sequence

from netpager.core.domain_types import (
    DEFAULT_PAGE_SIZE,
    CategoryAccessor,
    RequestTypeSpec,
    T,
)
from netpager.core.paginate import PaginationOptions, PaginationResult, paginate
from netpager.core.request_filter import (
    filter_requests,
    resource_type_of,
    sanitize_request_type_filter,
)


@dataclass(frozen=True)
class ListingOptions(PaginationOptions):
    """Paging options plus an optional request-type filter."""
    request_type: RequestTypeSpec | None = None


@dataclass(frozen=True)
class NetworkRequestsListing(PaginationResult[T]):
    applied_request_type: str | list[str] | None = None

    @property
    def is_filtered(self) -> bool:
        return self.applied_request_type is not None

    @property
    def applied_types(self) -> list[str]:
        if self.applied_request_type is None:
            return []
        if isinstance(self.applied_request_type, str):
            return [self.applied_request_type]
        return list(self.applied_request_type)


def list_network_requests(
    records: Sequence[T],
    options: ListingOptions | None = None,
    *,
    category: CategoryAccessor = resource_type_of,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> NetworkRequestsListing[T]:
    """Filter then paginate `records`. Pure, never raises."""
    options = options or ListingOptions()
    applied = sanitize_request_type_filter(options.request_type)
    filtered = filter_requests(records, applied, category)

    page = paginate(
        filtered,
        PaginationOptions(page_size=options.page_size, page_token=options.page_token),
        default_page_size,
    )
    return NetworkRequestsListing(
        items=page.items,
        start_index=page.start_index,
        end_index=page.end_index,
        total=page.total,
        invalid_token=page.invalid_token,
        next_page_token=page.next_page_token,
        previous_page_token=page.previous_page_token,
        applied_request_type=applied,
    )
