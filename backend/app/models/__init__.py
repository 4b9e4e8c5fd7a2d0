"""ORM Models: SQLAlchemy declarative models.

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all runs
"""

from app.models.tutorial import Tutorial  # noqa: F401
