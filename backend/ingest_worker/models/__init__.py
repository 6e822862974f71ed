"""Models package."""
from ingest_worker.models.application import Application

__all__ = ["Application"]
