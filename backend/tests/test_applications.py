import pytest

from ingest_worker.services.applications import ApplicationRepository
from ingest_worker.utils.exceptions import ConfigurationError

from factories import KNOWN_DSN


@pytest.mark.asyncio
async def test_get_by_dsn_found(seeded_database):
    repository = ApplicationRepository(seeded_database)
    application = await repository.get_by_dsn(KNOWN_DSN)
    assert application is not None
    assert application.dsn == KNOWN_DSN
    assert application.name == "Marketing site"


@pytest.mark.asyncio
async def test_get_by_dsn_missing(seeded_database):
    repository = ApplicationRepository(seeded_database)
    assert await repository.get_by_dsn("nobody") is None


def test_repository_requires_database_url():
    with pytest.raises(ConfigurationError):
        ApplicationRepository(None)
