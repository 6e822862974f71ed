"""Schemas for web vitals batches.

Two wire versions are accepted:

- legacy (``POST /``): flat records, the metric fields sit at the top level
- v1 (``POST /v1``): records tagged ``event_name: "web-vitals"`` with the
  metric fields nested under ``data``

Both are enriched into flat records carrying the request context.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ingest_worker.utils.exceptions import ValidationError


class _Record(BaseModel):
    """Strict, immutable record parsed from client JSON."""
    model_config = ConfigDict(strict=True, frozen=True)


class LegacyWebVital(_Record):
    """One metric sample in the legacy flat shape."""
    dsn: str
    name: str = Field(..., description="Metric name, e.g. CLS, LCP, INP")
    href: str
    id: str
    speed: str = Field(..., description="Effective connection type reported by the browser")
    path: str
    rating: Optional[str] = None
    value: float
    screen: str
    session_id: str

    def flatten(self) -> Dict[str, Any]:
        """Return the record's fields with the metric name as event name."""
        return {**self.model_dump(), "event_name": self.name}


class WebVitalData(_Record):
    """Metric fields nested under ``data`` in the v1 shape."""
    name: str
    rating: Optional[str] = None
    value: float
    id: str


class WebVitalV1(_Record):
    """One metric sample in the versioned nested shape."""
    event_name: Literal["web-vitals"]
    dsn: str
    href: str
    speed: str
    path: str
    screen: str
    session_id: str
    data: WebVitalData

    def flatten(self) -> Dict[str, Any]:
        """Return the top-level fields with ``data`` merged in."""
        return {**self.model_dump(exclude={"data"}), **self.data.model_dump()}


TelemetryRecord = Union[LegacyWebVital, WebVitalV1]


class EnrichmentContext(BaseModel):
    """Request-derived context applied to every record of one batch."""
    model_config = ConfigDict(frozen=True)

    browser: str = ""
    os: str = ""
    country: str = ""
    city: str = ""
    continent: str = ""
    region_code: str = ""
    timezone: str = ""


class _Enriched(BaseModel):
    model_config = ConfigDict(frozen=True)

    event_name: str
    dsn: str
    href: str
    id: str
    speed: str
    path: str
    name: str
    rating: Optional[str] = None
    value: float
    screen: str
    session_id: str

    browser: str = ""
    os: str = ""
    country: str = ""
    city: str = ""
    continent: str = ""
    region_code: str = ""
    timezone: str = ""
    device: str = ""


class EnrichedLegacyRecord(_Enriched):
    """Legacy record forwarded to the ingestion endpoint."""
    pass


class EnrichedWebVital(_Enriched):
    """v1 record forwarded to the analytics backend."""
    event_name: Literal["web-vitals"] = "web-vitals"


LegacyBatch = TypeAdapter(Annotated[List[LegacyWebVital], Field(min_length=1)])
V1Batch = TypeAdapter(Annotated[List[WebVitalV1], Field(min_length=1)])


def _parse(adapter: TypeAdapter, raw: Union[bytes, str], version: str) -> list:
    try:
        return adapter.validate_json(raw)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid {version} web vitals batch",
            errors=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


def parse_legacy_batch(raw: Union[bytes, str]) -> List[LegacyWebVital]:
    """
    Parse a raw request body as a legacy batch.

    Args:
        raw: Request body bytes

    Returns:
        Validated records in array order

    Raises:
        ValidationError: If the body is not JSON or any element is malformed
    """
    return _parse(LegacyBatch, raw, "legacy")


def parse_v1_batch(raw: Union[bytes, str]) -> List[WebVitalV1]:
    """
    Parse a raw request body as a v1 batch.

    Raises:
        ValidationError: If the body is not JSON or any element is malformed
    """
    return _parse(V1Batch, raw, "v1")
