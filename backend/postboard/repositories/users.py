"""SQLAlchemy implementation of UserRepository.

Invariants:
    - Read-only: users are seed data
    - list_users pages by OFFSET page_number * page_size, LIMIT page_size,
      in storage order (insertion order on SQLite)
    - user_exists never raises for an unknown id
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.domain_types import PageRequest, UserId
from postboard.infrastructure.database import storage_errors
from postboard.models.user import User as UserModel
from postboard.schemas.user import User

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy:
    """SQLAlchemy implementation of the UserRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count_users(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        async with storage_errors(self._session, "count users"):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    async def list_users(self, page: PageRequest) -> list[User]:
        stmt = select(UserModel).offset(page.offset).limit(page.page_size)
        async with storage_errors(self._session, "list users"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        logger.debug(
            "Listed %d users (page %d, size %d)",
            len(rows), page.page_number, page.page_size,
        )
        return [User.from_row(row) for row in rows]

    async def user_exists(self, user_id: UserId) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id).limit(1)
        async with storage_errors(self._session, "check user existence"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none() is not None
