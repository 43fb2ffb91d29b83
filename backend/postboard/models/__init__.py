"""ORM Models: SQLAlchemy declarative models for users and posts.

Design Decisions:
    - One file per entity
    - Importing this package registers the users and posts tables on Base.metadata,
      which DatabaseSessionManager.open() uses for create_all
"""

from postboard.models.user import User  # noqa: F401
from postboard.models.post import Post  # noqa: F401
