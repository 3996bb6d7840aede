"""Tools Registry: advertised schemas share the Filter's allow-list.

Tests cover:
    - Both network tools advertised with input schemas
    - requestType enum equals FILTERABLE_RESOURCE_TYPES
    - pageSize maximum follows the configured host bound
"""

from netpager.core.domain_types import FILTERABLE_RESOURCE_TYPES
from netpager.services.tools_registry import get_all_tools, get_tool_definition


def test_all_tools_have_name_description_and_schema():
    tools = get_all_tools(100)
    assert [t["name"] for t in tools] == ["list_network_requests", "get_network_request"]
    for tool in tools:
        assert tool["description"]
        assert tool["input_schema"]["type"] == "object"


def test_request_type_enum_is_the_shared_allow_list():
    schema = get_tool_definition("list_network_requests", 100)["input_schema"]
    scalar, array = schema["properties"]["requestType"]["anyOf"]
    assert scalar["enum"] == list(FILTERABLE_RESOURCE_TYPES)
    assert array["items"]["enum"] == list(FILTERABLE_RESOURCE_TYPES)


def test_page_size_maximum_follows_bound():
    schema = get_tool_definition("list_network_requests", 25)["input_schema"]
    assert schema["properties"]["pageSize"]["maximum"] == 25
    assert schema["properties"]["pageSize"]["minimum"] == 1


def test_default_bound_comes_from_settings(monkeypatch):
    monkeypatch.setenv("MAX_PAGE_SIZE", "60")
    schema = get_tool_definition("list_network_requests")["input_schema"]
    assert schema["properties"]["pageSize"]["maximum"] == 60


def test_get_network_request_requires_url():
    tool = get_tool_definition("get_network_request", 100)
    assert tool["input_schema"]["required"] == ["url"]


def test_unknown_tool_definition_is_none():
    assert get_tool_definition("nope", 100) is None
