"""Network Handlers: list_network_requests, get_network_request.

Invariants:
    - Handlers never touch capture state directly; they configure the response
    - Input validated by pydantic before use; failures raise ToolValidationError
    - pageSize above Settings.max_page_size is rejected (host bound)
    - pageToken is passed through untouched: the paginator owns its validation

Design Decisions:
    - Schema validation rejects unknown requestType values at the tool boundary,
      the Filter still sanitizes for direct core callers
    - Handlers are sync: no IO, dispatch owns the await/lock
"""

from pydantic import BaseModel, ValidationError

from netpager.core.errors import ErrorContext, ToolValidationError
from netpager.core.list_requests import ListingOptions
from netpager.schemas.network import GetNetworkRequestInput, ListNetworkRequestsInput
from netpager.services.define_network_tools import (
    GET_NETWORK_REQUEST,
    LIST_NETWORK_REQUESTS,
)
from netpager.services.network_response import NetworkToolResponse


def _parse(model: type[BaseModel], input_data: dict, tool_name: str):
    try:
        return model.model_validate(input_data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "input"
        raise ToolValidationError(
            f"Invalid '{field}': {first['msg']}", field,
            ErrorContext(tool_name=tool_name),
        ) from e

class NetworkHandlers:
    """Network listing tool handlers."""

    def __init__(self, max_page_size: int):
        self.max_page_size = max_page_size

    def list_network_requests(
        self, response: NetworkToolResponse, input_data: dict,
    ) -> None:
        params = _parse(ListNetworkRequestsInput, input_data, LIST_NETWORK_REQUESTS)
        if params.page_size is not None and params.page_size > self.max_page_size:
            raise ToolValidationError(
                f"pageSize must be <= {self.max_page_size}", "pageSize",
                ErrorContext(tool_name=LIST_NETWORK_REQUESTS),
            )

        response.set_include_network_requests(True, ListingOptions(
            page_size=params.page_size,
            page_token=params.page_token,
            request_type=params.request_type_values(),
        ))

    def get_network_request(
        self, response: NetworkToolResponse, input_data: dict,
    ) -> None:
        params = _parse(GetNetworkRequestInput, input_data, GET_NETWORK_REQUEST)
        response.attach_network_request(params.url)
        response.set_include_network_requests(True)
