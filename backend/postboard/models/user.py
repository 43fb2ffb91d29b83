"""User ORM: directory entries seeded out-of-band and read-only at runtime.

Invariants:
    - id is an opaque string primary key, never generated by this service
    - name, username, email, phone are non-nullable
    - Address columns are nullable and may carry surrounding whitespace;
      normalization happens on read (repositories/users.py)
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from postboard.db.base import Base


class User(Base):
    """User entity: a directory entry that owns posts."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    street: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str | None] = mapped_column(Text, nullable=True)
    zipcode: Mapped[str | None] = mapped_column(Text, nullable=True)
