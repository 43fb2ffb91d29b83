"""Boundary Protocols: contracts between the HTTP surface and storage.

Invariants:
    - Routes depend on these Protocols, never on a concrete repository class
    - Every method is async because implementations do IO
    - Implementations raise StorageError on storage faults and never return
      partial results

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol

from postboard.core.domain_types import PageRequest, PostId, UserId
from postboard.schemas.post import Post
from postboard.schemas.user import User


class UserRepository(Protocol):
    """Contract for read-only user access."""
    async def count_users(self) -> int: ...
    async def list_users(self, page: PageRequest) -> list[User]: ...
    async def user_exists(self, user_id: UserId) -> bool: ...


class PostRepository(Protocol):
    """Contract for post persistence."""
    async def list_posts_for_user(self, user_id: UserId) -> list[Post]: ...
    async def create_post(
        self, user_id: UserId, title: str, body: str,
    ) -> Post: ...
    async def delete_post(self, post_id: PostId) -> bool: ...
