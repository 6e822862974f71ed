"""Request context enrichment for web vitals batches."""
from typing import Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from ingest_worker.schemas.web_vitals import EnrichmentContext, TelemetryRecord
from ingest_worker.services.signatures import browser_name, detect_os

T = TypeVar("T", bound=BaseModel)

# Cloudflare visitor location headers
COUNTRY_HEADER = "cf-ipcountry"
CITY_HEADER = "cf-ipcity"
REGION_CODE_HEADER = "cf-region-code"
TIMEZONE_HEADER = "cf-timezone"
CONTINENT_HEADER = "cf-ipcontinent"


class EdgeMetadata(BaseModel):
    """Connection metadata attached to the request by the network edge."""
    model_config = ConfigDict(frozen=True)

    city: Optional[str] = None
    region_code: Optional[str] = None
    timezone: Optional[str] = None
    continent: Optional[str] = None


def edge_metadata_from_headers(headers: Mapping[str, str]) -> EdgeMetadata:
    """Read edge connection metadata from the visitor location headers."""
    return EdgeMetadata(
        city=headers.get(CITY_HEADER),
        region_code=headers.get(REGION_CODE_HEADER),
        timezone=headers.get(TIMEZONE_HEADER),
        continent=headers.get(CONTINENT_HEADER),
    )


def derive_context(headers: Mapping[str, str], edge: Optional[EdgeMetadata] = None) -> EnrichmentContext:
    """
    Derive the enrichment context for one request.

    Missing signals degrade to empty strings; this never rejects a request.

    Args:
        headers: Inbound request headers (case-insensitive mapping)
        edge: Edge connection metadata, if the request carries any

    Returns:
        Context shared by every record of the request
    """
    edge = edge or EdgeMetadata()
    user_agent = headers.get("user-agent") or ""

    return EnrichmentContext(
        browser=browser_name(user_agent) or "",
        os=detect_os(user_agent) or "",
        country=headers.get(COUNTRY_HEADER) or "",
        city=edge.city or "",
        continent=edge.continent or "",
        region_code=edge.region_code or "",
        timezone=edge.timezone or "",
    )


def enrich(records: Iterable[TelemetryRecord], context: EnrichmentContext, target: Type[T]) -> List[T]:
    """
    Merge the request context into every record.

    Args:
        records: Validated records, legacy or v1
        context: Context derived once for the request
        target: Enriched model to build for each record

    Returns:
        New enriched records in input order
    """
    shared = context.model_dump()
    return [target(**{**record.flatten(), **shared}) for record in records]
