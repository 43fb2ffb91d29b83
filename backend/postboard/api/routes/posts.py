"""Posts Routes: list a user's posts, create a post, delete a post.

Invariants:
    - POST validation order: presence/type of title, body, userId, then blankness
      of title, body, userId; first failure wins (core/validate_input.py)
    - Unknown user on create -> 404 "User not found", checked before the insert
    - GET does not check user existence: unknown user -> 200 []
    - DELETE success -> 204 with an empty body; unknown id -> 404 "Post not found"
    - Storage faults surface as 500 "Internal server error" via the global handler
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response, status

from postboard.api.dependencies import get_post_repository, get_user_repository
from postboard.core.errors import ResourceNotFoundError
from postboard.core.repository_protocols import PostRepository, UserRepository
from postboard.core.validate_input import (
    validate_new_post, validate_post_id, validate_user_id_query,
)
from postboard.schemas.post import Post

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/posts", tags=["posts"])


async def _read_json_body(request: Request) -> Any:
    """Parsed JSON body, or None when the body is empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.get("", response_model=list[Post])
async def list_posts(
    user_id: str | None = Query(None, alias="userId"),
    posts: PostRepository = Depends(get_post_repository),
):
    """List every post of one user."""
    return await posts.list_posts_for_user(validate_user_id_query(user_id))


@router.post(
    "", response_model=Post, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: Request,
    posts: PostRepository = Depends(get_post_repository),
    users: UserRepository = Depends(get_user_repository),
):
    """Create a post for an existing user."""
    new_post = validate_new_post(await _read_json_body(request))

    if not await users.user_exists(new_post.user_id):
        raise ResourceNotFoundError("User", new_post.user_id)

    return await posts.create_post(
        new_post.user_id, new_post.title, new_post.body,
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    posts: PostRepository = Depends(get_post_repository),
):
    """Hard-delete a post by id."""
    trimmed_id = validate_post_id(post_id)
    if not await posts.delete_post(trimmed_id):
        raise ResourceNotFoundError("Post", trimmed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
