"""
Request executor: single-attempt dispatch plus the rate-limit retry loop.
"""
import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional
from urllib.parse import urlencode

import httpx

from ..backoff import parse_retry_after, resolve_retry_delay_ms
from ..config import DEFAULT_CONTENT_TYPE, ClientConfig, ResolvedConfig, resolve_config
from ..errors import (
    NotionAPIError,
    NotionError,
    NotionNetworkError,
    NotionRequestTimeoutError,
    error_response_from_body,
    generic_error_response,
)
from ..types import QueryValue, RequestContext, RequestDescriptor

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[NotionClient]"

Sleep = Callable[[float], Awaitable[None]]


def _format_body(body: Any) -> str:
    """
    Format body for logging safeguards against binary data.
    """
    if body is None:
        return "<empty>"
    if isinstance(body, (bytes, bytearray)):
        return f"<binary data: {len(body)} bytes>"
    if isinstance(body, str):
        # Truncate long strings
        if len(body) > 5000:
            return body[:5000] + "... (truncated)"
        return body
    try:
        formatted = json.dumps(body, indent=2)
    except (TypeError, ValueError):
        formatted = str(body)
    if len(formatted) > 5000:
        return formatted[:5000] + "... (truncated)"
    return formatted


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


def _format_query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(api_url: str, path: str, query: Optional[Mapping[str, QueryValue]] = None) -> str:
    """Join the versioned API url, the path and the query string.

    None-valued query entries are dropped; the remaining ones keep their
    insertion order.
    """
    url = f"{api_url}{path}"
    if query:
        pairs = [(key, _format_query_value(value)) for key, value in query.items() if value is not None]
        if pairs:
            url = f"{url}?{urlencode(pairs)}"
    return url


class RequestExecutor:
    """
    Turns a RequestDescriptor into a network call against the Notion API.

    Rate limited responses (HTTP 429 / ``rate_limited``) are retried up to
    ``max_retries`` times, waiting for the server's ``Retry-After`` hint or
    an exponential backoff. Every other failure is raised on first
    occurrence.
    """

    def __init__(self, config: ClientConfig, *, sleep: Optional[Sleep] = None):
        self._config: ResolvedConfig = resolve_config(config)
        self._sleep: Sleep = sleep or asyncio.sleep

    @property
    def config(self) -> ResolvedConfig:
        return self._config

    async def close(self) -> None:
        """Close the transport if we own it."""
        transport = self._config.transport
        if self._config.owns_transport and hasattr(transport, "aclose"):
            await transport.aclose()

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """Execute a request, retrying rate limited attempts."""
        max_attempts = self._config.max_retries + 1
        last_error: Optional[NotionError] = None

        for attempt in range(max_attempts):
            try:
                return await self._attempt(descriptor)
            except NotionAPIError as e:
                if not self._should_retry(e, attempt):
                    raise
                last_error = e
                delay_ms = resolve_retry_delay_ms(attempt, e.retry_after_ms)
                logger.warning(
                    f"{LOG_PREFIX} Rate limited on {descriptor.method} {descriptor.path}, "
                    f"retrying in {delay_ms}ms (retry {attempt + 1}/{self._config.max_retries})"
                )
                await self._sleep(delay_ms / 1000)

        if last_error is not None:
            raise last_error
        raise RuntimeError("Retry policy exhausted without executing request.")

    def _should_retry(self, error: NotionAPIError, attempt: int) -> bool:
        return (
            error.is_rate_limited()
            and self._config.retry_on_rate_limit
            and attempt < self._config.max_retries
        )

    async def _attempt(self, descriptor: RequestDescriptor) -> Any:
        """Make a single HTTP request to the Notion API."""
        url = build_url(self._config.api_url, descriptor.path, descriptor.query)
        headers = self._build_headers()
        content = self._serialize_body(descriptor.body)

        if logger.isEnabledFor(logging.DEBUG):
            context: RequestContext = {
                "method": descriptor.method,
                "url": url,
                "headers": {**headers, "Authorization": _mask_value(headers["Authorization"])},
                "body": descriptor.body,
            }
            logger.debug(
                f"{LOG_PREFIX} Request: {context['method']} {context['url']} "
                f"headers={context['headers']} body={_format_body(context['body'])}"
            )

        try:
            response = await asyncio.wait_for(
                self._config.transport(
                    descriptor.method, url, headers=headers, content=content
                ),
                timeout=self._config.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"{LOG_PREFIX} Request timed out: {descriptor.method} {url}")
            raise NotionRequestTimeoutError(
                f"Request timed out after {self._config.timeout_ms}ms",
                timeout_ms=self._config.timeout_ms,
            ) from e
        except NotionError:
            raise
        except Exception as e:
            logger.error(f"{LOG_PREFIX} Request failed: {descriptor.method} {url}: {e!r}")
            raise NotionNetworkError("Network request failed", e) from e

        return self._handle_response(response)

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.auth.get_secret_value()}",
            "Content-Type": DEFAULT_CONTENT_TYPE,
            "Notion-Version": self._config.notion_version,
        }

    @staticmethod
    def _serialize_body(body: Any) -> Optional[bytes]:
        if body is None:
            return None
        return json.dumps(body).encode("utf-8")

    def _handle_response(self, response: httpx.Response) -> Any:
        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {response.reason_phrase}")

        if not response.is_success:
            raise self._error_from_response(response)

        # 204 No Content carries no body
        if response.status_code == 204:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{LOG_PREFIX} Response body is not valid JSON (status {response.status_code})")
            raise NotionNetworkError("Network request failed: response body is not valid JSON", e) from e

    @staticmethod
    def _error_from_response(response: httpx.Response) -> NotionAPIError:
        retry_after_ms = parse_retry_after(response.headers.get("Retry-After"))

        try:
            body = response.json()
        except ValueError:
            # If we can't parse the error body, create a generic error
            error_body = generic_error_response(response.status_code, response.reason_phrase)
        else:
            error_body = error_response_from_body(body, response.status_code, response.reason_phrase)

        return NotionAPIError(error_body, retry_after_ms)
