"""Network Tool Response: per-call builder that renders a tool result from capture state.

Invariants:
    - One instance per tool call; handlers configure it, dispatch builds it
    - Listing is computed at build time against a fresh snapshot of the capture
    - Attached url that is not in the capture raises ResourceNotFoundError
    - Text always starts with "# {tool_name} response"

Design Decisions:
    - Handlers record intent (include listing, attach url); rendering happens once
      in build() so every tool renders the listing the same way
    - Structured listing returned alongside text: API clients read fields,
      LLM clients read text
    - Listing and request payloads use camelCase keys like the tool input
      (nextPageToken, appliedRequestType); the schema models own those names.
      Envelope keys (status, text, request, network_requests) match the error envelope
"""

import logging

from netpager.core.capture_state import NetworkCaptureState, NetworkRequest
from netpager.core.errors import ErrorContext, ResourceNotFoundError
from netpager.core.format_network import format_listing, format_request_detail
from netpager.core.list_requests import (
    ListingOptions,
    NetworkRequestsListing,
    list_network_requests,
)
from netpager.schemas.network import (
    NetworkRequestResponse,
    NetworkRequestsListingResponse,
)

logger = logging.getLogger(__name__)


def serialize_request(request: NetworkRequest) -> dict:
    return request_response(request).model_dump(by_alias=True)


def serialize_listing(listing: NetworkRequestsListing[NetworkRequest]) -> dict:
    return listing_response(listing).model_dump(by_alias=True)


def request_response(request: NetworkRequest) -> NetworkRequestResponse:
    return NetworkRequestResponse(
        url=request.url,
        method=request.method,
        resource_type=request.resource_type,
        status=request.status,
        status_label=request.status_label,
    )


def listing_response(
    listing: NetworkRequestsListing[NetworkRequest],
) -> NetworkRequestsListingResponse:
    return NetworkRequestsListingResponse(
        requests=[request_response(r) for r in listing.items],
        start_index=listing.start_index,
        end_index=listing.end_index,
        total=listing.total,
        invalid_token=listing.invalid_token,
        next_page_token=listing.next_page_token,
        previous_page_token=listing.previous_page_token,
        applied_request_type=listing.applied_request_type,
    )


class NetworkToolResponse:
    """Collects what a tool wants to show, renders it on build()."""

    def __init__(self):
        self._lines: list[str] = []
        self._include_network_requests = False
        self._listing_options: ListingOptions | None = None
        self._attached_url: str | None = None

    def append_line(self, line: str) -> None:
        self._lines.append(line)

    def set_include_network_requests(
        self, value: bool, options: ListingOptions | None = None,
    ) -> None:
        self._include_network_requests = value
        self._listing_options = options if value else None

    def attach_network_request(self, url: str) -> None:
        self._attached_url = url

    @property
    def include_network_requests(self) -> bool:
        return self._include_network_requests

    @property
    def listing_options(self) -> ListingOptions | None:
        return self._listing_options

    @property
    def attached_url(self) -> str | None:
        return self._attached_url

    def build(
        self,
        tool_name: str,
        state: NetworkCaptureState,
        default_page_size: int,
        capture_id: str | None = None,
    ) -> dict:
        """Render text + structured listing. Raises ResourceNotFoundError."""
        lines = [f"# {tool_name} response", *self._lines]
        result: dict = {"status": "ok"}

        if self._attached_url is not None:
            request = state.find_request(self._attached_url)
            if request is None:
                raise ResourceNotFoundError(
                    "Network request", self._attached_url,
                    ErrorContext(capture_id=capture_id, tool_name=tool_name),
                )
            lines += format_request_detail(request)
            result["request"] = serialize_request(request)

        if self._include_network_requests:
            listing = list_network_requests(
                state.get_requests(),
                self._listing_options,
                default_page_size=default_page_size,
            )
            if listing.invalid_token:
                logger.warning(
                    "Invalid page token, falling back to first page",
                    extra={
                        "capture_id": capture_id, "tool_name": tool_name,
                        "page_token": self._listing_options.page_token,
                        "total": listing.total,
                    },
                )
            lines += format_listing(listing)
            result["network_requests"] = serialize_listing(listing)

        result["text"] = "\n".join(lines)
        return result
