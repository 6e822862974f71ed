"""Delivery of enriched web vitals to the analytics backend.

Forwarding runs after the response has been sent, so nothing here raises:
outcomes are either ignored (legacy) or logged (v1).
"""
import asyncio
from typing import Optional, Protocol, Sequence

import httpx

from ingest_worker.schemas.web_vitals import EnrichedLegacyRecord, EnrichedWebVital
from ingest_worker.services.tenant_guard import ApplicationLookup, resolve_tenant
from ingest_worker.services.tinybird import TinybirdClient
from ingest_worker.utils.exceptions import ConfigurationError
from ingest_worker.utils.logger import logger


class Forwarder(Protocol):
    async def deliver(self, records: Sequence) -> None:
        ...


class LegacyForwarder:
    """Posts each record to the ingestion endpoint as its own request."""

    def __init__(
        self,
        endpoint: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not endpoint:
            raise ConfigurationError(
                "Ingestion endpoint must be configured. Set API_ENDPOINT environment variable."
            )
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

    async def _post(self, client: httpx.AsyncClient, record: EnrichedLegacyRecord) -> httpx.Response:
        return await client.post(
            self.endpoint,
            content=record.model_dump_json(exclude_none=True),
            headers={"Content-Type": "application/json"},
        )

    async def deliver(self, records: Sequence[EnrichedLegacyRecord]) -> None:
        """
        Send every record concurrently and wait for all calls to settle.

        Individual results, including failures, are discarded.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            await asyncio.gather(
                *(self._post(client, record) for record in records),
                return_exceptions=True,
            )
        logger.info("Inserted")


class V1Forwarder:
    """Checks the tenant, then sends the whole batch in one ingestion call."""

    def __init__(self, repository: ApplicationLookup, analytics: TinybirdClient):
        self.repository = repository
        self.analytics = analytics

    async def deliver(self, records: Sequence[EnrichedWebVital]) -> None:
        try:
            application = await resolve_tenant(records, self.repository)
            if application is None:
                return

            await self.analytics.ingest_web_vitals(records)
            logger.info(f"Inserted {len(records)} web vitals for application {application.id}")
        except Exception as e:
            logger.error(f"Failed to forward web vitals batch: {e}", exc_info=True)
