"""Network Schemas: boundary validation of tool input and captured requests."""

import pytest
from pydantic import ValidationError

from netpager.core.domain_types import ResourceType
from netpager.schemas.network import (
    ListNetworkRequestsInput,
    NetworkRequestCreate,
    NetworkRequestsListingResponse,
)


def test_list_input_reads_camel_case_aliases():
    params = ListNetworkRequestsInput.model_validate(
        {"pageSize": 5, "pageToken": "10", "requestType": "font"},
    )
    assert params.page_size == 5
    assert params.page_token == "10"
    assert params.request_type is ResourceType.FONT
    assert params.request_type_values() == "font"


def test_list_input_request_type_list_values_are_plain_strings():
    params = ListNetworkRequestsInput.model_validate({"requestType": ["image", "xhr"]})
    assert params.request_type_values() == ["image", "xhr"]


def test_list_input_ignores_unknown_fields():
    params = ListNetworkRequestsInput.model_validate({"pageIdx": 3})
    assert params.page_size is None


def test_list_input_rejects_bool_page_size():
    with pytest.raises(ValidationError):
        ListNetworkRequestsInput.model_validate({"pageSize": True})


def test_captured_request_defaults():
    body = NetworkRequestCreate.model_validate({"url": "https://a"})
    assert body.method == "GET"
    assert body.resource_type == "other"
    assert body.status is None


def test_captured_request_accepts_camel_case_fields():
    body = NetworkRequestCreate.model_validate({
        "url": "https://a", "resourceType": "image", "status": 200,
        "requestHeaders": {"accept": "*/*"},
    })
    assert body.resource_type == "image"
    assert body.request_headers == {"accept": "*/*"}


def test_captured_request_rejects_impossible_status():
    with pytest.raises(ValidationError):
        NetworkRequestCreate.model_validate({"url": "https://a", "status": 42})


def test_listing_response_dumps_camel_case():
    body = NetworkRequestsListingResponse(
        requests=[], start_index=0, end_index=0, total=0, invalid_token=True,
    ).model_dump(by_alias=True)
    assert body["invalidToken"] is True
    assert body["nextPageToken"] is None
    assert body["appliedRequestType"] is None
