import json

import httpx
import pytest

from ingest_worker.schemas import EnrichedWebVital, EnrichmentContext, parse_v1_batch
from ingest_worker.services.enrichment import enrich
from ingest_worker.services.tinybird import TinybirdClient
from ingest_worker.utils.exceptions import ConfigurationError

from factories import v1_record


def batch():
    records = parse_v1_batch(json.dumps([v1_record(id="a"), v1_record(id="b")]))
    return enrich(records, EnrichmentContext(country="NL"), EnrichedWebVital)


@pytest.mark.asyncio
async def test_ingest_web_vitals_posts_ndjson():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(202, json={"successful_rows": 2, "quarantined_rows": 0})

    client = TinybirdClient("tb_token", base_url="https://tinybird.test/", transport=httpx.MockTransport(handler))
    await client.ingest_web_vitals(batch())

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v0/events"
    assert request.url.params["name"] == "web_vitals__v0"
    assert request.headers["authorization"] == "Bearer tb_token"
    rows = [json.loads(line) for line in request.content.decode().splitlines()]
    assert [row["id"] for row in rows] == ["a", "b"]
    assert all(row["country"] == "NL" and row["event_name"] == "web-vitals" for row in rows)


@pytest.mark.asyncio
async def test_ingest_web_vitals_raises_on_rejection():
    client = TinybirdClient(
        "tb_token",
        transport=httpx.MockTransport(lambda request: httpx.Response(403, json={"error": "forbidden"})),
    )
    with pytest.raises(httpx.HTTPStatusError):
        await client.ingest_web_vitals(batch())


def test_client_requires_token():
    with pytest.raises(ConfigurationError):
        TinybirdClient(None)


@pytest.mark.asyncio
async def test_ingest_web_vitals_omits_missing_rating():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(202)

    records = parse_v1_batch(json.dumps([v1_record(id="a", rating=None)]))
    client = TinybirdClient("tb_token", transport=httpx.MockTransport(handler))
    await client.ingest_web_vitals(enrich(records, EnrichmentContext(), EnrichedWebVital))

    (row,) = [json.loads(line) for line in seen[0].content.decode().splitlines()]
    assert "rating" not in row
    assert row["device"] == ""
