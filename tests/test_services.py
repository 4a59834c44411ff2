"""
Services over either backend, context wiring and app lifespan.
"""
from datetime import datetime, timezone

import pytest
from loguru import logger

from apps.breeder.models import Breeder
from apps.breeder.service import BreederService
from apps.cat.models import Cat
from apps.context import AppContext, build_context
from apps.dog.fixture_repository import FixtureDogRepository
from apps.dog.models import Dog
from apps.dog.repository import MySQLDogRepository
from apps.dog.service import DogService
from framework.config import settings
from framework.repository.fixture import FIXTURE_INSERT_ID
from main import create_app, lifespan


def _dog() -> Dog:
    return Dog(
        dog_name="Scout",
        breed_id=1,
        breeder_id=2,
        color="Brown",
        date_of_birth=datetime(2024, 2, 29, tzinfo=timezone.utc),
        spayed_neutered=0,
        description="Puppy",
        weight=3,
    )


async def test_fixture_writes_do_not_persist(fixture_context: AppContext):
    service = fixture_context.dog_service

    assert await service.create_dog(_dog()) == FIXTURE_INSERT_ID
    await service.update_dog(_dog())
    await service.delete_dog(1)
    await service.delete_dog(1)

    assert [d.dog_name for d in await service.get_all_dogs()] == ["Bella", "Max"]


async def test_fixture_reads_are_copies(fixture_context: AppContext):
    service = fixture_context.breeder_service

    breeder = await service.get_breeder_by_id(1)
    breeder.city = "Nowhere"

    assert (await service.get_breeder_by_id(1)).city == "Portland"
    assert await service.get_breeder_by_id(999) is None


async def test_service_logs_carry_the_context_trace_id(fixture_context: AppContext):
    records = []
    sink_id = logger.add(lambda message: records.append(message.record["extra"].copy()), level="INFO")
    try:
        with logger.contextualize(trace_id="req-42"):
            await fixture_context.dog_service.delete_dog(1)
    finally:
        logger.remove(sink_id)

    assert {"name": "dog_service", "trace_id": "req-42"} in records


async def test_cat_fixture_service(fixture_context: AppContext):
    service = fixture_context.cat_service
    cat = Cat(
        cat_name="Pixel",
        breed_id=2,
        breeder_id=1,
        color="Grey",
        date_of_birth=datetime(2022, 1, 1, tzinfo=timezone.utc),
        weight=9,
    )

    assert await service.create_cat(cat) == FIXTURE_INSERT_ID
    assert (await service.get_breed_by_id(1)).breed == "Persian"
    assert (await service.get_cat_by_id(2)).cat_name == "Luna"


async def test_service_round_trip_on_mysql(mysql_context: AppContext):
    service = mysql_context.dog_service

    dog_id = await service.create_dog(_dog())
    stored = await service.get_dog_by_id(dog_id)
    assert stored.dog_name == "Scout"

    stored.weight = 4
    await service.update_dog(stored)
    assert (await service.get_dog_by_id(dog_id)).weight == 4

    await service.delete_dog(dog_id)
    await service.delete_dog(dog_id)
    assert await service.get_dog_by_id(dog_id) is None


async def test_breeder_service_on_mysql(mysql_context: AppContext):
    service = mysql_context.breeder_service

    breeder_id = await service.create_breeder(Breeder(breeder_name="Zen Cattery", city="Austin"))

    names = [b.breeder_name for b in await service.get_all_breeders()]
    assert names == ["Furry Friends Inc", "Happy Paws Breeders", "Zen Cattery"]
    assert (await service.get_breeder_by_id(breeder_id)).active == 1


def test_build_context_selects_backend(session_factory):
    fixture = build_context("fixture")
    relational = build_context("mysql", session_factory=session_factory, timeout=1.5)

    assert isinstance(fixture.dog_service.repo, FixtureDogRepository)
    assert isinstance(relational.dog_service.repo, MySQLDogRepository)
    assert relational.dog_service.repo.timeout == 1.5
    assert isinstance(relational.breeder_service, BreederService)


def test_build_context_rejects_bad_input():
    with pytest.raises(ValueError):
        build_context("mongodb")
    with pytest.raises(ValueError):
        build_context("mysql")


def test_services_accept_any_repository():
    service = DogService(FixtureDogRepository())
    assert isinstance(service.repo, FixtureDogRepository)


async def test_lifespan_builds_context_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "REPOSITORY_BACKEND", "fixture")
    app = create_app()

    async with lifespan(app):
        context = app.state.context
        assert isinstance(context, AppContext)
        assert context.driver is None
        assert len(await context.dog_service.get_all_breeds()) == 3

    assert app.state.context is None


async def test_lifespan_keeps_injected_context(fixture_context: AppContext):
    app = create_app(fixture_context)

    async with lifespan(app):
        assert app.state.context is fixture_context
