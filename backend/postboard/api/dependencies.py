"""Route Dependencies: per-request repositories bound to the shared storage handle."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.config import Settings, get_settings
from postboard.core.repository_protocols import PostRepository, UserRepository
from postboard.infrastructure.database import get_db
from postboard.repositories.posts import PostRepositorySQLAlchemy
from postboard.repositories.users import UserRepositorySQLAlchemy


def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return UserRepositorySQLAlchemy(db)


def get_post_repository(
    db: AsyncSession = Depends(get_db),
) -> PostRepository:
    return PostRepositorySQLAlchemy(db)


def get_app_settings() -> Settings:
    return get_settings()
