"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

import logging

from blemap.db.session import engine
from blemap.models.base import Base
from blemap.models import project, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured on %s", engine.url.render_as_string(hide_password=True))
