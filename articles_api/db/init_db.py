"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from sqlalchemy.engine import Engine

from articles_api.models.base import Base
from articles_api.models import article, user  # noqa: F401


def init_db(bind: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=bind)
