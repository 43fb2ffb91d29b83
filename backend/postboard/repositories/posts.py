"""SQLAlchemy implementation of PostRepository.

Invariants:
    - create_post generates id (UUID4) and created_at (UTC, ms precision, "Z")
      before the insert; the returned Post mirrors the persisted row exactly
    - create_post commits; a zero-row insert is a failure, not a silent no-op
    - delete_post returns False for an unknown id and raises only on storage faults
    - list_posts_for_user does not check that the user exists
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.domain_types import PostId, UserId
from postboard.core.errors import PostCreationError, StorageError
from postboard.infrastructure.database import storage_errors
from postboard.models.post import Post as PostModel
from postboard.schemas.post import Post

logger = logging.getLogger(__name__)


def new_post_identity() -> tuple[PostId, str]:
    """Return a fresh post id and the current ISO-8601 timestamp."""
    post_id = PostId(str(uuid.uuid4()))
    created_at = (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
    return post_id, created_at


class PostRepositorySQLAlchemy:
    """SQLAlchemy implementation of the PostRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_posts_for_user(self, user_id: UserId) -> list[Post]:
        stmt = select(PostModel).where(PostModel.user_id == user_id)
        async with storage_errors(self._session, "list posts"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [Post.model_validate(row) for row in rows]

    async def create_post(
        self, user_id: UserId, title: str, body: str,
    ) -> Post:
        try:
            post_id, created_at = new_post_identity()
        except (OSError, NotImplementedError) as e:
            logger.error(
                f"Error generating post identity: {e}",
                extra={"user_id": user_id, "operation": "create post"},
            )
            raise PostCreationError(
                "Failed to create post", PostCreationError.IDENTITY_GENERATION,
            ) from e

        post = Post(
            id=post_id, user_id=user_id, title=title, body=body,
            created_at=created_at,
        )
        stmt = insert(PostModel.__table__).values(**post.model_dump())
        try:
            async with storage_errors(self._session, "create post"):
                result = await self._session.execute(stmt)
                if result.rowcount == 0:
                    await self._session.rollback()
                    raise PostCreationError(
                        "Post was not created", PostCreationError.NOT_PERSISTED,
                    )
                await self._session.commit()
        except PostCreationError:
            raise
        except StorageError as e:
            raise PostCreationError(
                "Failed to save post to database", PostCreationError.WRITE_FAILED,
            ) from e

        logger.info(
            "Created post", extra={"post_id": post.id, "user_id": user_id},
        )
        return post

    async def delete_post(self, post_id: PostId) -> bool:
        stmt = delete(PostModel).where(PostModel.id == post_id)
        async with storage_errors(self._session, "delete post"):
            result = await self._session.execute(stmt)
            await self._session.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted post", extra={"post_id": post_id})
        return deleted
