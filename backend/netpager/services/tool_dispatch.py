"""Tool Dispatch: explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic or auto-discovery
    - Unknown tools return UNKNOWN_TOOL error (never raises)
    - NetPagerError from a handler or from rendering becomes an error result (never raises)
    - Calls on one dispatch are serialized by a single asyncio.Lock
    - Every tool call logged with tool_name and outcome

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Lock lives here, not in the core: the core is pure and needs none;
      serializing calls is host policy
    - Fresh NetworkToolResponse per call: no rendering state leaks between calls
"""

import asyncio
import logging

from netpager.config import Settings, get_settings
from netpager.core.capture_state import NetworkCaptureState
from netpager.core.errors import ErrorContext, NetPagerError, UnknownToolError
from netpager.services.define_network_tools import (
    GET_NETWORK_REQUEST,
    LIST_NETWORK_REQUESTS,
)
from netpager.services.handle_network import NetworkHandlers
from netpager.services.network_response import NetworkToolResponse

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(
        self, state: NetworkCaptureState,
        settings: Settings | None = None,
        capture_id: str | None = None,
    ):
        self._state = state
        self._settings = settings or get_settings()
        self._capture_id = capture_id
        self._lock = asyncio.Lock()
        network = NetworkHandlers(self._settings.max_page_size)

        # ADR: every mapping explicit, adding a tool requires editing this dict
        self._handlers = {
            LIST_NETWORK_REQUESTS: network.list_network_requests,
            GET_NETWORK_REQUEST: network.get_network_request,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def execute(self, tool_name: str, input_data: dict | None = None) -> dict:
        """Route tool_name to handler. Returns result dict. Logs every call."""
        async with self._lock:
            try:
                result = self._run(tool_name, input_data or {})
            except NetPagerError as e:
                result = e.to_tool_result()
            self._log_tool_call(tool_name, result)
            return result

    def _run(self, tool_name: str, input_data: dict) -> dict:
        handler = self._handlers.get(tool_name)
        if not handler:
            raise UnknownToolError(
                tool_name, ErrorContext(capture_id=self._capture_id),
            )
        response = NetworkToolResponse()
        handler(response, input_data)
        return response.build(
            tool_name, self._state,
            self._settings.default_page_size,
            capture_id=self._capture_id,
        )

    def _log_tool_call(self, tool_name: str, result: dict) -> None:
        extra = {"capture_id": self._capture_id, "tool_name": tool_name}
        if result.get("status") == "error":
            logger.warning(
                f"Tool '{tool_name}' failed: {result.get('message')}",
                extra={**extra, "error_code": result.get("error_code")},
            )
            return
        listing = result.get("network_requests") or {}
        logger.info(
            f"Tool '{tool_name}' ok",
            extra={**extra, "total": listing.get("total")},
        )
