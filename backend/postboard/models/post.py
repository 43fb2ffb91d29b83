"""Post ORM: a note authored by exactly one user.

Invariants:
    - id and created_at are assigned by PostRepository.create_post, never by the DB
    - user_id references users.id (FK enforced; SQLite needs PRAGMA foreign_keys)
    - created_at is an ISO-8601 string, stored as TEXT for interoperability
"""

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from postboard.db.base import Base


class Post(Base):
    """Post entity: title and body owned by a user."""
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    user_id: Mapped[str] = mapped_column(
        Text, ForeignKey("users.id"), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column(Text, nullable=False)
