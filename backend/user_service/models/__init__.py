"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models never leak past the repository: they convert to core entities

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all / alembic
"""

from user_service.models.user import UserModel  # noqa: F401
