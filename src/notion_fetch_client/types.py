"""
Core type definitions for notion-fetch-client.
"""
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional, TypedDict, Union

# HTTP Methods accepted by the Notion API
HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

QueryValue = Union[str, int, float, bool, None]

# Notion API error codes
NotionErrorCode = Literal[
    "invalid_json",
    "invalid_request_url",
    "invalid_request",
    "validation_error",
    "missing_version",
    "unauthorized",
    "restricted_resource",
    "object_not_found",
    "conflict_error",
    "rate_limited",
    "internal_server_error",
    "service_unavailable",
    "database_connection_unavailable",
    "gateway_timeout",
]


class NotionErrorResponse(TypedDict):
    """Error body returned by the API on non-2xx responses."""
    object: Literal["error"]
    status: int
    code: NotionErrorCode
    message: str


@dataclass(frozen=True)
class RequestDescriptor:
    """A single logical API operation."""
    method: HttpMethod
    path: str
    query: Optional[Mapping[str, QueryValue]] = None
    body: Any = None


class RequestContext(TypedDict):
    """Context passed to transport logging and debug hooks."""
    method: str
    url: str
    headers: Dict[str, str]
    body: Any
