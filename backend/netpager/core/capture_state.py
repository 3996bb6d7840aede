"""Capture State: in-memory, append-only log of requests seen during a live session.

Invariants:
    - requests only grow: record_request appends, nothing reorders or removes
    - get_requests() returns a tuple snapshot; later appends never alter it
    - find_request returns the most recent request with that exact url

Design Decisions:
    - In-memory dataclass, not DB: captures are session-scoped and disposable
      (ADR: single-process uvicorn, state lost on restart is acceptable)
    - Append-only is what keeps positional page tokens meaningful between calls
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NetworkRequest:
    """One captured request and whatever response state it has reached."""
    url: str
    method: str = "GET"
    resource_type: str = "other"
    status: int | None = None
    status_text: str = ""
    request_headers: dict[str, str] = field(default_factory=dict)
    response_headers: dict[str, str] = field(default_factory=dict)
    failure_text: str | None = None

    @property
    def status_label(self) -> str:
        if self.failure_text:
            return f"failed - {self.failure_text}"
        if self.status is None:
            return "pending"
        if 200 <= self.status < 400:
            return f"success - {self.status}"
        return f"failed - {self.status}"


@dataclass
class NetworkCaptureState:
    """Per-capture request log, pure dataclass, no IO."""

    requests: list[NetworkRequest] = field(default_factory=list)

    def record_request(self, request: NetworkRequest) -> int:
        """Append a request. Returns its position in the log."""
        self.requests.append(request)
        return len(self.requests) - 1

    def get_requests(self) -> tuple[NetworkRequest, ...]:
        return tuple(self.requests)

    def find_request(self, url: str) -> NetworkRequest | None:
        for request in reversed(self.requests):
            if request.url == url:
                return request
        return None
