"""Network Tool Schemas: JSON Schema definitions for the network listing tools.

Invariants:
    - requestType enum is FILTERABLE_RESOURCE_TYPES (same allow-list the Filter uses)
    - pageSize maximum is the host bound passed in, never a literal here
    - get_network_request requires url

Design Decisions:
    - Built by a function of max_page_size so Settings can tune the advertised bound
    - requestType as anyOf(scalar, array): callers may pass one type or many
"""

from netpager.core.domain_types import FILTERABLE_RESOURCE_TYPES

LIST_NETWORK_REQUESTS = "list_network_requests"
GET_NETWORK_REQUEST = "get_network_request"


def _request_type_schema() -> dict:
    enum = {"type": "string", "enum": list(FILTERABLE_RESOURCE_TYPES)}
    return {
        "anyOf": [enum, {"type": "array", "items": enum}],
        "description": (
            "Filter requests by resource type. When omitted, returns all requests."
        ),
    }


def build_network_tools(max_page_size: int) -> list[dict]:
    """Return the network tool definitions advertised to clients."""
    return [
        {
            "name": LIST_NETWORK_REQUESTS,
            "description": "List all requests for the currently selected page.",
            "annotations": {"category": "network", "readOnlyHint": True},
            "input_schema": {
                "type": "object",
                "properties": {
                    "pageSize": {
                        "type": "integer",
                        "minimum": 1,
                        "maximum": max_page_size,
                        "description": (
                            "Maximum number of requests to return. "
                            "When omitted, returns all requests."
                        ),
                    },
                    "pageToken": {
                        "type": "string",
                        "description": (
                            "Page token from a previous call (nextPageToken or "
                            "previousPageToken). When omitted, returns the first page."
                        ),
                    },
                    "requestType": _request_type_schema(),
                },
                "required": [],
            },
        },
        {
            "name": GET_NETWORK_REQUEST,
            "description": (
                "Gets a network request by URL. You can get all requests by "
                f"calling {LIST_NETWORK_REQUESTS}."
            ),
            "annotations": {"category": "network", "readOnlyHint": True},
            "input_schema": {
                "type": "object",
                "properties": {
                    "url": {"type": "string", "description": "The URL of the request."},
                },
                "required": ["url"],
            },
        },
    ]
