"""Read-only access to monitored applications in the system of record."""
from typing import Optional

from sqlalchemy import select

from ingest_worker.database import build_engine, build_sessionmaker
from ingest_worker.models import Application
from ingest_worker.utils.exceptions import ConfigurationError
from ingest_worker.utils.logger import logger


class ApplicationRepository:
    """Looks up applications by DSN. Built per request from its settings."""

    def __init__(self, database_url: Optional[str], auth_token: Optional[str] = None):
        if not database_url:
            raise ConfigurationError(
                "Database URL must be configured. "
                "Set DATABASE_URL (and DATABASE_AUTH_TOKEN if required)."
            )
        self.database_url = database_url
        self.auth_token = auth_token

    async def get_by_dsn(self, dsn: str) -> Optional[Application]:
        """
        Fetch the application registered under a DSN.

        Args:
            dsn: Application identity sent with the telemetry

        Returns:
            Application if found, None otherwise
        """
        engine = build_engine(self.database_url, self.auth_token)
        try:
            session_factory = build_sessionmaker(engine)
            async with session_factory() as session:
                result = await session.execute(
                    select(Application).where(Application.dsn == dsn).limit(1)
                )
                application = result.scalars().first()
                logger.debug(f"Application lookup for dsn {dsn}: {'found' if application else 'missing'}")
                return application
        finally:
            await engine.dispose()
