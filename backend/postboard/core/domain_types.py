"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and PostId are opaque strings; never parsed or reformatted
    - PageRequest always holds page_number >= 0 and page_size >= 1

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PageRequest:
    """A validated page of the user directory."""
    page_number: int
    page_size: int

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


@dataclass(frozen=True)
class NewPost:
    """Trimmed, validated input for post creation."""
    user_id: UserId
    title: str
    body: str
