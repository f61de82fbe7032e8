"""Database initialization - runs on backend startup."""
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.persistence.db import Base, engine
from app.infrastructure.persistence import models  # noqa: F401  registers tables on Base

logger = logging.getLogger(__name__)


def initialize_database(bind=None) -> bool:
    """Create the city table if it does not exist yet.

    Returns:
        bool: True if the schema is in place, False otherwise
    """
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("✅ Database schema initialized successfully")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        return False
