"""
Notion Fetch Client - resilient async client for the Notion API
"""

__version__ = "0.1.0"

from .backoff import compute_backoff_ms, parse_retry_after, resolve_retry_delay_ms
from .client import NotionClient
from .config import ClientConfig, ResolvedConfig, resolve_config
from .core.executor import RequestExecutor
from .core.request import RequestBuilder
from .core.transport import HttpxTransport, Transport
from .decoding import Decoder, model_decoder
from .errors import (
    NotionAPIError,
    NotionConfigError,
    NotionDecodeError,
    NotionError,
    NotionNetworkError,
    NotionRequestTimeoutError,
    NotionValidationError,
)
from .models import PaginatedList
from .notion import Notion
from .pagination import PaginationResult, paginate, paginate_iterator, paginate_with_metadata
from .types import HttpMethod, NotionErrorCode, RequestDescriptor
from .validation import LIMITS, validate_array_length, validate_string_length

__all__ = [
    "Notion", "NotionClient", "RequestExecutor", "RequestBuilder", "RequestDescriptor", "HttpMethod",
    "ClientConfig", "ResolvedConfig", "resolve_config",
    "HttpxTransport", "Transport",
    "Decoder", "model_decoder",
    "NotionError", "NotionAPIError", "NotionConfigError", "NotionDecodeError",
    "NotionNetworkError", "NotionRequestTimeoutError", "NotionValidationError", "NotionErrorCode",
    "compute_backoff_ms", "parse_retry_after", "resolve_retry_delay_ms",
    "LIMITS", "validate_array_length", "validate_string_length",
    "PaginatedList", "PaginationResult", "paginate", "paginate_iterator", "paginate_with_metadata",
]
