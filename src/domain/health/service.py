import logging
from typing import Optional

from pydantic import BaseModel

from src.infrastructure.database.client import PostgresClient

logger = logging.getLogger(__name__)


class HealthReport(BaseModel):
    status: str
    db: str
    error: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"


class HealthService:
    def __init__(self, db_client: Optional[PostgresClient], timeout: float = 2.0):
        self.db_client = db_client
        self.timeout = timeout

    async def check(self) -> HealthReport:
        """
        Probe the store with SELECT 1. Failures are reported as a degraded
        report, never raised.
        """
        if self.db_client is None:
            # in-memory order store, nothing to probe
            return HealthReport(status="ok", db="ok")

        try:
            await self.db_client.ping(timeout=self.timeout)
            return HealthReport(status="ok", db="ok")
        except Exception as e:
            message = str(e) or f"{type(e).__name__} after {self.timeout}s"
            logger.error(f"Database health check failed: {message}")
            return HealthReport(status="degraded", db="error", error=message)
