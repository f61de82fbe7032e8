"""Health check service for monitoring system components."""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.infrastructure.persistence.db import SessionLocal

logger = logging.getLogger(__name__)


class HealthStatus(str, Enum):
    """Health status values."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


class HealthCheckService:
    """Service for checking health of system components."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    def check_database(self) -> Dict[str, Any]:
        """Check database connectivity and the city table.

        Returns:
            Dictionary with status and details
        """
        if not settings.USE_DB_REPOS:
            return {
                "status": HealthStatus.HEALTHY,
                "message": "In-memory repository in use",
                "details": {"repository": "in_memory"},
            }

        session = self._session_factory()
        try:
            session.execute(text("SELECT 1 FROM city LIMIT 1"))
            return {
                "status": HealthStatus.HEALTHY,
                "message": "Database connection successful",
                "details": {"repository": "sqlalchemy"},
            }
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "status": HealthStatus.UNHEALTHY,
                "message": "Database check failed",
                "details": {"repository": "sqlalchemy", "error": str(e)},
            }
        finally:
            session.close()

    def get_overall_health(self) -> Dict[str, Any]:
        """Aggregate component checks into one report."""
        components = {"database": self.check_database()}

        statuses = {component["status"] for component in components.values()}
        if HealthStatus.UNHEALTHY in statuses:
            overall = HealthStatus.UNHEALTHY
        elif HealthStatus.DEGRADED in statuses:
            overall = HealthStatus.DEGRADED
        else:
            overall = HealthStatus.HEALTHY

        return {
            "status": overall,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "components": components,
        }


health_service = HealthCheckService()
