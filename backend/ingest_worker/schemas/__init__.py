"""Pydantic schemas for request validation and enriched records."""
from ingest_worker.schemas.ingest import HealthResponse, IngestResponse
from ingest_worker.schemas.web_vitals import (
    EnrichedLegacyRecord,
    EnrichedWebVital,
    EnrichmentContext,
    LegacyWebVital,
    WebVitalData,
    WebVitalV1,
    parse_legacy_batch,
    parse_v1_batch,
)

__all__ = [
    "HealthResponse",
    "IngestResponse",
    "EnrichedLegacyRecord",
    "EnrichedWebVital",
    "EnrichmentContext",
    "LegacyWebVital",
    "WebVitalData",
    "WebVitalV1",
    "parse_legacy_batch",
    "parse_v1_batch",
]
