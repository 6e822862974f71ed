"""Application model for monitored websites."""
from sqlalchemy import Column, DateTime, Integer, String, func
from ingest_worker.database import Base


class Application(Base):
    """Monitored application, identified by its DSN."""
    __tablename__ = "application"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    dsn = Column(String, nullable=False, unique=True, index=True)  # Key sent by the browser snippet
    workspace_id = Column(Integer, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
