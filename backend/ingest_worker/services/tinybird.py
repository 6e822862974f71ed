"""Tinybird Events API client for web vitals ingestion."""
from typing import Optional, Sequence

import httpx

from ingest_worker.schemas.web_vitals import EnrichedWebVital
from ingest_worker.utils.exceptions import ConfigurationError
from ingest_worker.utils.logger import logger


class TinybirdClient:
    """Client for appending rows to a Tinybird datasource over the Events API."""

    def __init__(
        self,
        token: Optional[str],
        base_url: str = "https://api.tinybird.co",
        datasource: str = "web_vitals__v0",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not token:
            raise ConfigurationError(
                "Tinybird token must be configured. Set TINYBIRD_TOKEN environment variable."
            )
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.datasource = datasource
        self.timeout = timeout
        self.transport = transport

    @property
    def events_url(self) -> str:
        return f"{self.base_url}/v0/events"

    async def ingest_web_vitals(self, records: Sequence[EnrichedWebVital]) -> None:
        """
        Append a batch of enriched web vitals in a single request.

        Args:
            records: Enriched records, one NDJSON row each

        Raises:
            httpx.HTTPError: If the request fails or Tinybird rejects it
        """
        body = "\n".join(record.model_dump_json(exclude_none=True) for record in records)
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/x-ndjson",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.events_url,
                params={"name": self.datasource},
                content=body,
                headers=headers,
            )
            response.raise_for_status()

        logger.debug(f"Tinybird accepted {len(records)} rows into {self.datasource}")
