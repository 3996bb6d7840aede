"""Tools Registry: flat list and lookup of advertised tool definitions.

Invariants:
    - Every tool in ALL_TOOLS has a handler in ToolDispatch
    - Tool names are unique

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery
"""

from netpager.config import get_settings
from netpager.services.define_network_tools import build_network_tools


def get_all_tools(max_page_size: int | None = None) -> list[dict]:
    if max_page_size is None:
        max_page_size = get_settings().max_page_size
    return [
        *build_network_tools(max_page_size),    # 2 tools
    ]


def get_tool_definition(name: str, max_page_size: int | None = None) -> dict | None:
    for tool in get_all_tools(max_page_size):
        if tool["name"] == name:
            return tool
    return None
