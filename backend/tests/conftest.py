import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from ingest_worker.config import Settings, get_settings
from ingest_worker.database import Base, build_engine, build_sessionmaker
from ingest_worker.main import app
from ingest_worker.models import Application

from factories import KNOWN_DSN


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'applications.db'}"


@pytest_asyncio.fixture()
async def seeded_database(database_url):
    engine = build_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = build_sessionmaker(engine)
    async with session_factory() as session:
        session.add(Application(name="Marketing site", dsn=KNOWN_DSN, workspace_id=1))
        await session.commit()
    await engine.dispose()
    return database_url


@pytest.fixture()
def test_settings(database_url):
    return Settings(
        api_endpoint="https://ingest.test/collect",
        database_url=database_url,
        tinybird_token="tb_test_token",
        tinybird_url="https://tinybird.test",
        environment="test",
    )


@pytest_asyncio.fixture()
async def client(test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
