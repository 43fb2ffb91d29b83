"""Users Routes: paginated directory listing and total count.

Invariants:
    - pageNumber/pageSize default to settings (0 and 4) when absent or non-numeric
    - pageNumber < 0 or pageSize < 1 -> 400 {"message": ...} before any storage call
    - Address fields in every returned user are strings, never null
"""

import logging

from fastapi import APIRouter, Depends, Query

from postboard.api.dependencies import get_app_settings, get_user_repository
from postboard.config import Settings
from postboard.core.repository_protocols import UserRepository
from postboard.core.validate_input import parse_page_param, validate_page_request
from postboard.schemas.user import User, UserCount

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[User])
async def list_users(
    page_number: str | None = Query(None, alias="pageNumber"),
    page_size: str | None = Query(None, alias="pageSize"),
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
):
    """List one page of users."""
    page = validate_page_request(
        parse_page_param(page_number, settings.users_default_page_number),
        parse_page_param(page_size, settings.users_default_page_size),
        settings.users_max_page_size,
    )
    return await users.list_users(page)


@router.get("/count", response_model=UserCount)
async def count_users(
    users: UserRepository = Depends(get_user_repository),
):
    """Total number of users, for client-side page computation."""
    return UserCount(count=await users.count_users())
