"""Tenant checks run before a v1 batch is forwarded."""
from typing import Iterable, Optional, Protocol, Set

from ingest_worker.models import Application
from ingest_worker.schemas.web_vitals import EnrichedWebVital
from ingest_worker.utils.logger import logger


class ApplicationLookup(Protocol):
    async def get_by_dsn(self, dsn: str) -> Optional[Application]:
        ...


def distinct_dsns(records: Iterable[EnrichedWebVital]) -> Set[str]:
    """Collect the distinct DSNs addressed by a batch."""
    return {record.dsn for record in records}


async def resolve_tenant(
    records: Iterable[EnrichedWebVital],
    repository: ApplicationLookup,
) -> Optional[Application]:
    """
    Resolve the single application a batch belongs to.

    A batch addressing several DSNs, or a DSN the system of record does not
    know, has no destination. Both cases are logged and yield None; the
    caller has already been acknowledged.

    Args:
        records: Enriched v1 records of one request
        repository: System of record lookup

    Returns:
        The application, or None if the batch must not be forwarded
    """
    dsns = distinct_dsns(records)
    if len(dsns) != 1:
        logger.warning(f"Dropping web vitals batch addressing {len(dsns)} distinct DSNs")
        return None

    dsn = next(iter(dsns))
    application = await repository.get_by_dsn(dsn)
    if not application:
        logger.warning(f"Dropping web vitals batch for unknown DSN {dsn}")
        return None

    return application
