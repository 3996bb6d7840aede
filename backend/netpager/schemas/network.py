"""Network Schemas: Pydantic models for tool input and capture API payloads.

Invariants:
    - requestType accepts one ResourceType or a list of them, nothing else
    - pageSize must be a positive integer when given (upper bound checked by handler)
    - Wire names are camelCase in both directions (pageSize in, nextPageToken out);
      Python names snake_case

Design Decisions:
    - Aliases over camelCase attributes: tool schemas advertise camelCase,
      Python code stays PEP 8
    - Upper bound for pageSize comes from Settings, so it is not a Field constraint here
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from netpager.core.domain_types import ResourceType


class ListNetworkRequestsInput(BaseModel):
    """list_network_requests tool input."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page_size: int | None = Field(None, alias="pageSize", ge=1, strict=True)
    page_token: str | None = Field(None, alias="pageToken")
    request_type: ResourceType | list[ResourceType] | None = Field(
        None, alias="requestType",
    )

    @field_validator("request_type")
    @classmethod
    def reject_empty_list(cls, v):
        if isinstance(v, list) and not v:
            return None
        return v

    def request_type_values(self) -> str | list[str] | None:
        if self.request_type is None:
            return None
        if isinstance(self.request_type, list):
            return [t.value for t in self.request_type]
        return self.request_type.value


class GetNetworkRequestInput(BaseModel):
    """get_network_request tool input."""
    url: str = Field(min_length=1)


class NetworkRequestCreate(BaseModel):
    """A captured request pushed by the browser driver."""
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(min_length=1)
    method: str = "GET"
    resource_type: str = Field("other", alias="resourceType")
    status: int | None = Field(None, ge=100, le=599)
    status_text: str = Field("", alias="statusText")
    request_headers: dict[str, str] = Field(default_factory=dict, alias="requestHeaders")
    response_headers: dict[str, str] = Field(default_factory=dict, alias="responseHeaders")
    failure_text: str | None = Field(None, alias="failureText")


class NetworkRequestResponse(BaseModel):
    """Captured request as returned by listings and tool results."""
    model_config = ConfigDict(populate_by_name=True)

    url: str
    method: str
    resource_type: str = Field(alias="resourceType")
    status: int | None
    status_label: str = Field(alias="statusLabel")


class CaptureResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    request_count: int = Field(alias="requestCount")


class NetworkRequestsListingResponse(BaseModel):
    """Listing payload, mirrors NetworkRequestsListing."""
    model_config = ConfigDict(populate_by_name=True)

    requests: list[NetworkRequestResponse]
    start_index: int = Field(alias="startIndex")
    end_index: int = Field(alias="endIndex")
    total: int
    invalid_token: bool = Field(alias="invalidToken")
    next_page_token: str | None = Field(None, alias="nextPageToken")
    previous_page_token: str | None = Field(None, alias="previousPageToken")
    applied_request_type: str | list[str] | None = Field(None, alias="appliedRequestType")
