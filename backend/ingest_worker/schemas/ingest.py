"""Schemas for ingestion responses."""
from typing import Literal

from pydantic import BaseModel


class IngestResponse(BaseModel):
    """Acknowledgement returned once a batch is accepted for forwarding."""
    status: Literal["ok"] = "ok"


class HealthResponse(BaseModel):
    status: str = "healthy"
