"""Post Schema: post record as served by /posts."""

from pydantic import BaseModel, ConfigDict


class Post(BaseModel):
    """Public post record. user_id keeps its snake_case wire name."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    body: str
    created_at: str
