"""
Client-side request size limits.

These guards run before a request is built, so oversized payloads fail with
an actionable message instead of a generic 400 from the API.
See https://developers.notion.com/reference/request-limits#size-limits
"""
from dataclasses import dataclass
from typing import Sized

from .errors import NotionValidationError


@dataclass(frozen=True)
class Limits:
    """Notion API request size limits."""
    RICH_TEXT_CONTENT: int = 2_000
    RICH_TEXT_LINK_URL: int = 2_000
    EQUATION_EXPRESSION: int = 1_000
    ARRAY_ELEMENTS: int = 100
    URL: int = 2_000
    EMAIL: int = 200
    PHONE_NUMBER: int = 200
    MULTI_SELECT: int = 100
    RELATION: int = 100
    PEOPLE: int = 100
    COMMENT_ATTACHMENTS: int = 3
    PAYLOAD_BLOCKS: int = 1_000
    PAYLOAD_SIZE_BYTES: int = 500 * 1_024


LIMITS = Limits()


def utf16_length(value: str) -> int:
    """Length of ``value`` in UTF-16 code units, the unit Notion counts in."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def validate_string_length(value: str, max_length: int, label: str) -> None:
    """Raise NotionValidationError if ``value`` is longer than ``max_length`` UTF-16 code units."""
    length = utf16_length(value)
    if length > max_length:
        raise NotionValidationError(
            f"{label} exceeds the {max_length}-character limit (got {length})"
        )


def validate_array_length(items: Sized, max_length: int, label: str) -> None:
    """Raise NotionValidationError if ``items`` has more than ``max_length`` elements."""
    if len(items) > max_length:
        raise NotionValidationError(
            f"{label} exceeds the {max_length}-element limit (got {len(items)})"
        )
