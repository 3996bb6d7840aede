"""Network Formatting: pure text rendering of request details and listings.

Invariants:
    - All functions are pure (no IO, no async)
    - Listing section always starts with "## Network requests"
    - "Showing {a}-{b} of {n}." uses 1-based inclusive bounds
    - Invalid token notice precedes the page so readers see it first

Design Decisions:
    - Returns list[str] lines; the response builder joins them (ADR: composable sections)
    - Empty-result wording depends on whether a filter was applied
"""

from netpager.core.capture_state import NetworkRequest
from netpager.core.list_requests import NetworkRequestsListing

INVALID_TOKEN_NOTICE = "Invalid page token provided. Showing first page."
NO_REQUESTS = "No requests found."
NO_REQUESTS_FOR_TYPES = "No requests found for the selected type(s)."


def format_request_line(request: NetworkRequest) -> str:
    return f"{request.url} {request.method} [{request.status_label}]"


def _format_headers(title: str, headers: dict[str, str]) -> list[str]:
    if not headers:
        return []
    return [title, *(f"- {name}:{value}" for name, value in headers.items())]


def format_request_detail(request: NetworkRequest) -> list[str]:
    """Detail block for a single attached request."""
    status = " ".join(filter(None, (request.status_text, f"[{request.status_label}]")))
    lines = [f"## Request {request.url}", f"Status: {status}"]
    lines += _format_headers("### Request Headers", request.request_headers)
    lines += _format_headers("### Response Headers", request.response_headers)
    if request.failure_text:
        lines += ["### Failure", request.failure_text]
    return lines


def format_listing(listing: NetworkRequestsListing[NetworkRequest]) -> list[str]:
    """Render one page of a listing with its navigation hints."""
    lines = ["## Network requests"]
    if listing.is_filtered:
        lines.append(f"Filtered by type: {', '.join(listing.applied_types)}")
    if listing.invalid_token:
        lines.append(INVALID_TOKEN_NOTICE)

    if listing.total == 0:
        lines.append(NO_REQUESTS_FOR_TYPES if listing.is_filtered else NO_REQUESTS)
        return lines

    lines.append(
        f"Showing {listing.start_index + 1}-{listing.end_index} of {listing.total}."
    )
    if listing.next_page_token is not None:
        lines.append(f"Next: {listing.next_page_token}")
    if listing.previous_page_token is not None:
        lines.append(f"Prev: {listing.previous_page_token}")
    lines.extend(format_request_line(request) for request in listing.items)
    return lines
