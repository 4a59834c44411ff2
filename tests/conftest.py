"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import apps.models  # noqa: F401  (registers every table)
from apps.breeder.fixture_repository import BREEDERS
from apps.breeder.models import BreederRecord
from apps.cat.fixture_repository import CAT_BREEDS, CATS
from apps.cat.models import CatBreedRecord, CatRecord
from apps.context import build_context
from apps.dog.fixture_repository import DOG_BREEDS, DOGS
from apps.dog.models import DogBreedRecord, DogRecord
from main import create_app


# In-memory SQLite stands in for MySQL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _breed_record(record_class, breed):
    return record_class(
        id=breed.id,
        breed=breed.breed,
        weight_low_lbs=breed.weight_low_lbs,
        weight_high_lbs=breed.weight_high_lbs,
        lifespan=breed.average_lifespan,
        details=breed.details,
        alternate_names=breed.alternate_names,
        geographic_origin=breed.geographic_origin,
    )


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create async test database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def seeded(session_factory):
    """Load the fixture data sets into the relational tables, ids included."""
    async with session_factory() as session:
        session.add_all([BreederRecord(**b.model_dump()) for b in BREEDERS.all()])
        session.add_all([_breed_record(DogBreedRecord, b) for b in DOG_BREEDS.all()])
        session.add_all([_breed_record(CatBreedRecord, b) for b in CAT_BREEDS.all()])
        await session.commit()
        session.add_all([DogRecord(**d.model_dump()) for d in DOGS.all()])
        session.add_all([CatRecord(**c.model_dump()) for c in CATS.all()])
        await session.commit()
    return session_factory


@pytest.fixture
def fixture_context():
    return build_context("fixture")


@pytest.fixture
def mysql_context(seeded):
    return build_context("mysql", session_factory=seeded)


async def _client_for(context) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(context)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def client(fixture_context) -> AsyncGenerator[AsyncClient, None]:
    """Test client over the fixture backend."""
    async for ac in _client_for(fixture_context):
        yield ac


@pytest.fixture
async def mysql_client(mysql_context) -> AsyncGenerator[AsyncClient, None]:
    """Test client over the relational backend (SQLite, seeded with the fixture data)."""
    async for ac in _client_for(mysql_context):
        yield ac
