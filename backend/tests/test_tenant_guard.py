import json

import pytest

from ingest_worker.models import Application
from ingest_worker.schemas import EnrichedWebVital, EnrichmentContext, parse_v1_batch
from ingest_worker.services.enrichment import enrich
from ingest_worker.services.tenant_guard import distinct_dsns, resolve_tenant

from factories import KNOWN_DSN, v1_record


class StubRepository:
    def __init__(self, *dsns):
        self.applications = {dsn: Application(id=i + 1, name=dsn, dsn=dsn) for i, dsn in enumerate(dsns)}
        self.lookups = []

    async def get_by_dsn(self, dsn):
        self.lookups.append(dsn)
        return self.applications.get(dsn)


def enriched(*records):
    return enrich(parse_v1_batch(json.dumps(list(records))), EnrichmentContext(), EnrichedWebVital)


def test_distinct_dsns():
    batch = enriched(v1_record("a"), v1_record("a"), v1_record("b"))
    assert distinct_dsns(batch) == {"a", "b"}


@pytest.mark.asyncio
async def test_resolve_tenant_single_known_dsn():
    repository = StubRepository(KNOWN_DSN)
    application = await resolve_tenant(enriched(v1_record(), v1_record(id="v1-2")), repository)
    assert application.dsn == KNOWN_DSN
    assert repository.lookups == [KNOWN_DSN]


@pytest.mark.asyncio
async def test_resolve_tenant_mixed_dsns_skips_lookup():
    repository = StubRepository(KNOWN_DSN, "other")
    application = await resolve_tenant(enriched(v1_record(), v1_record("other")), repository)
    assert application is None
    assert repository.lookups == []


@pytest.mark.asyncio
async def test_resolve_tenant_unknown_dsn():
    repository = StubRepository(KNOWN_DSN)
    assert await resolve_tenant(enriched(v1_record("unknown")), repository) is None
    assert repository.lookups == ["unknown"]
