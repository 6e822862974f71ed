"""Database connection for the system of record."""
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

Base = declarative_base()


def build_engine(database_url: str, auth_token: Optional[str] = None, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for one request.

    NullPool keeps nothing open between requests; every lookup opens and
    closes its own connection.

    Args:
        database_url: SQLAlchemy async URL of the system of record
        auth_token: Optional credential, sent as the URL password
        echo: Log emitted SQL

    Returns:
        AsyncEngine bound to the database
    """
    url = make_url(database_url)
    if auth_token:
        url = url.set(password=auth_token)
    return create_async_engine(url, poolclass=NullPool, echo=echo)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory for an engine."""
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
