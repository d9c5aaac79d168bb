"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine

from qa_auth.db.session import engine
from qa_auth.models.base import Base
from qa_auth.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Engine = engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=bind)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_db(bind: Engine = engine) -> None:
    Base.metadata.drop_all(bind=bind)
