"""
Request builder helper.
"""
from typing import Any, Dict, Mapping

from ..types import HttpMethod, QueryValue, RequestDescriptor


class RequestBuilder:
    """Fluent builder for RequestDescriptor."""

    def __init__(self, path: str = "", method: HttpMethod = "GET"):
        self._path = path
        self._method: HttpMethod = method
        self._query: Dict[str, QueryValue] = {}
        self._body: Any = None

    def path(self, path: str) -> "RequestBuilder":
        self._path = path
        return self

    def method(self, method: HttpMethod) -> "RequestBuilder":
        self._method = method
        return self

    def param(self, key: str, value: QueryValue) -> "RequestBuilder":
        self._query[key] = value
        return self

    def params(self, params: Mapping[str, QueryValue]) -> "RequestBuilder":
        self._query.update(params)
        return self

    def json(self, data: Any) -> "RequestBuilder":
        self._body = data
        return self

    def build(self) -> RequestDescriptor:
        """Get the constructed descriptor. The builder can keep being used."""
        return RequestDescriptor(
            method=self._method,
            path=self._path,
            query=dict(self._query) if self._query else None,
            body=self._body,
        )
