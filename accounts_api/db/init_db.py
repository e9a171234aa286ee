"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine

from accounts_api.models.base import Base
from accounts_api.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)
