"""Input Validation: pure checks applied at the HTTP boundary before any storage call.

Invariants:
    - All functions are PURE: no IO, no logging, raise or return only
    - validate_new_post checks in fixed order and stops at the first failure:
      type/presence of title, body, userId, then blankness of title, body, userId
    - Returned values are always trimmed
    - An accepted PageRequest keeps LIMIT and OFFSET within MAX_SQL_INTEGER

Design Decisions:
    - Hand-written checks over a Pydantic model: Pydantic reports per-field,
      while the client contract needs one message in a fixed priority order
"""

import math
from typing import Any

from postboard.core.domain_types import NewPost, PageRequest, PostId, UserId
from postboard.core.errors import InvalidInputError, InvalidPaginationError


# LIMIT and OFFSET are bound as signed 64-bit integers
MAX_SQL_INTEGER = 2**63 - 1

# (payload key, presence message, blank message)
_POST_FIELDS: tuple[tuple[str, str, str], ...] = (
    (
        "title",
        "Title is required and must be a string",
        "Title cannot be empty or contain only whitespace",
    ),
    (
        "body",
        "Body is required and must be a string",
        "Body cannot be empty or contain only whitespace",
    ),
    (
        "userId",
        "User ID is required and must be a string",
        "User ID cannot be empty or contain only whitespace",
    ),
)


def parse_page_param(raw: str | None, default: int) -> int:
    """Parse a query value; absent or non-numeric falls back to default."""
    if raw is None:
        return default
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or not value.is_integer():
        return default
    return int(value)


def validate_page_request(
    page_number: int, page_size: int, max_page_size: int | None = None,
) -> PageRequest:
    if page_number < 0 or page_size < 1:
        raise InvalidPaginationError()
    if max_page_size is not None and page_size > max_page_size:
        raise InvalidPaginationError()
    if page_size > MAX_SQL_INTEGER or page_number * page_size > MAX_SQL_INTEGER:
        raise InvalidPaginationError()
    return PageRequest(page_number=page_number, page_size=page_size)


def validate_new_post(payload: Any) -> NewPost:
    """Validate a POST /posts body and return trimmed values.

    A payload that is not a mapping is treated as having no fields.
    """
    fields = payload if isinstance(payload, dict) else {}

    for key, missing_message, _ in _POST_FIELDS:
        value = fields.get(key)
        if not isinstance(value, str) or not value:
            raise InvalidInputError(missing_message, key)

    trimmed = {key: fields[key].strip() for key, _, _ in _POST_FIELDS}
    for key, _, blank_message in _POST_FIELDS:
        if not trimmed[key]:
            raise InvalidInputError(blank_message, key)

    return NewPost(
        user_id=UserId(trimmed["userId"]),
        title=trimmed["title"],
        body=trimmed["body"],
    )


def validate_user_id_query(raw: str | None) -> UserId:
    if not raw:
        raise InvalidInputError("userId is required", "userId")
    return UserId(raw)


def validate_post_id(raw: str | None) -> PostId:
    trimmed = raw.strip() if isinstance(raw, str) else ""
    if not trimmed:
        raise InvalidInputError("Post ID is required", "id")
    return PostId(trimmed)
