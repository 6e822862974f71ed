"""FastAPI dependencies providing per-request collaborators."""
from fastapi import Depends, Request

from ingest_worker.config import Settings, get_settings
from ingest_worker.services.applications import ApplicationRepository
from ingest_worker.services.enrichment import EdgeMetadata, edge_metadata_from_headers
from ingest_worker.services.forwarding import LegacyForwarder, V1Forwarder
from ingest_worker.services.tinybird import TinybirdClient
from ingest_worker.utils.exceptions import ConfigurationError, configuration_error
from ingest_worker.utils.logger import logger


def get_edge_metadata(request: Request) -> EdgeMetadata:
    """Edge connection metadata for the current request."""
    return edge_metadata_from_headers(request.headers)


def get_legacy_forwarder(settings: Settings = Depends(get_settings)) -> LegacyForwarder:
    try:
        return LegacyForwarder(settings.api_endpoint, timeout=settings.forward_timeout_seconds)
    except ConfigurationError as e:
        logger.error(f"Cannot build legacy forwarder: {e}")
        raise configuration_error(e, "Legacy forwarder")


def get_v1_forwarder(settings: Settings = Depends(get_settings)) -> V1Forwarder:
    """Build the v1 forwarder with fresh clients for this request."""
    try:
        repository = ApplicationRepository(settings.database_url, settings.database_auth_token)
        analytics = TinybirdClient(
            settings.tinybird_token,
            base_url=settings.tinybird_url,
            datasource=settings.tinybird_datasource,
            timeout=settings.forward_timeout_seconds,
        )
    except ConfigurationError as e:
        logger.error(f"Cannot build v1 forwarder: {e}")
        raise configuration_error(e, "v1 forwarder")
    return V1Forwarder(repository, analytics)
