"""Web vitals ingestion endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ingest_worker.constants import GREETING
from ingest_worker.deps import get_edge_metadata, get_legacy_forwarder, get_v1_forwarder
from ingest_worker.schemas.ingest import IngestResponse
from ingest_worker.schemas.web_vitals import (
    EnrichedLegacyRecord,
    EnrichedWebVital,
    LegacyWebVital,
    WebVitalV1,
    parse_legacy_batch,
    parse_v1_batch,
)
from ingest_worker.services.enrichment import EdgeMetadata, derive_context, enrich
from ingest_worker.services.forwarding import Forwarder
from ingest_worker.services.scheduler import TaskScheduler, get_scheduler
from ingest_worker.utils.exceptions import ValidationError, validation_error
from ingest_worker.utils.logger import logger

router = APIRouter(tags=["ingest"])


async def legacy_batch(request: Request) -> List[LegacyWebVital]:
    """
    Validated legacy records from the raw body.

    The body is read raw because beacons are usually sent as text/plain.
    Declared first on the route so a malformed body is rejected before any
    collaborator is built.
    """
    try:
        return parse_legacy_batch(await request.body())
    except ValidationError as e:
        logger.info(f"Rejected legacy batch: {e.message} ({len(e.errors)} errors)")
        raise validation_error(e.message, e.errors)


async def v1_batch(request: Request) -> List[WebVitalV1]:
    """Validated v1 records from the raw body."""
    try:
        return parse_v1_batch(await request.body())
    except ValidationError as e:
        logger.info(f"Rejected v1 batch: {e.message} ({len(e.errors)} errors)")
        raise validation_error(e.message, e.errors)


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Health probe."""
    return GREETING


@router.post("/", response_model=IngestResponse)
async def ingest_legacy(
    request: Request,
    records: List[LegacyWebVital] = Depends(legacy_batch),
    edge: EdgeMetadata = Depends(get_edge_metadata),
    forwarder: Forwarder = Depends(get_legacy_forwarder),
    scheduler: TaskScheduler = Depends(get_scheduler),
) -> IngestResponse:
    """
    Ingest a batch of legacy web vitals.

    Each enriched record is posted to the ingestion endpoint after the
    response is sent; the acknowledgement does not depend on the outcome.
    """
    context = derive_context(request.headers, edge)
    payload = enrich(records, context, EnrichedLegacyRecord)

    scheduler.schedule(forwarder.deliver, payload)
    return IngestResponse()


@router.post("/v1", response_model=IngestResponse)
async def ingest_v1(
    request: Request,
    records: List[WebVitalV1] = Depends(v1_batch),
    edge: EdgeMetadata = Depends(get_edge_metadata),
    forwarder: Forwarder = Depends(get_v1_forwarder),
    scheduler: TaskScheduler = Depends(get_scheduler),
) -> IngestResponse:
    """
    Ingest a batch of v1 web vitals.

    After the response is sent the batch is checked against the system of
    record and, if it belongs to exactly one known application, sent to
    Tinybird in one call.
    """
    context = derive_context(request.headers, edge)
    payload = enrich(records, context, EnrichedWebVital)

    scheduler.schedule(forwarder.deliver, payload)
    return IngestResponse()
