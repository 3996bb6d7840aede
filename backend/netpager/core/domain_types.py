"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ResourceType is the ONLY allow-list of filterable request categories
    - FILTERABLE_RESOURCE_TYPES preserves ResourceType declaration order
    - PageToken is always a base-10 string of a non-negative integer when issued

Design Decisions:
    - str Enum: members compare equal to their raw string, so records carrying a
      plain "image" match ResourceType.IMAGE without conversion
    - Tool schemas and the Filter both read FILTERABLE_RESOURCE_TYPES
      (ADR: one allow-list, two consumers)
"""

from enum import Enum
from typing import Callable, NewType, Sequence, TypeVar, Union


# ─── Value Types ─────────────────────────────────────────────────

PageToken = NewType("PageToken", str)          # str(offset), offset >= 0
CaptureId = NewType("CaptureId", str)

T = TypeVar("T")

# Reads the categorical attribute of an opaque record
CategoryAccessor = Callable[[T], str | None]

RequestTypeSpec = Union[str, Sequence[str]]


# ─── Enums ───────────────────────────────────────────────────────

class ResourceType(str, Enum):
    """Recognized request categories, in the order tools advertise them."""
    DOCUMENT = "document"
    STYLESHEET = "stylesheet"
    IMAGE = "image"
    MEDIA = "media"
    FONT = "font"
    SCRIPT = "script"
    TEXTTRACK = "texttrack"
    XHR = "xhr"
    FETCH = "fetch"
    PREFETCH = "prefetch"
    EVENTSOURCE = "eventsource"
    WEBSOCKET = "websocket"
    MANIFEST = "manifest"
    SIGNEDEXCHANGE = "signedexchange"
    PING = "ping"
    CSPVIOLATIONREPORT = "cspviolationreport"
    PREFLIGHT = "preflight"
    FEDCM = "fedcm"
    OTHER = "other"


FILTERABLE_RESOURCE_TYPES: tuple[str, ...] = tuple(t.value for t in ResourceType)

DEFAULT_PAGE_SIZE = 20
