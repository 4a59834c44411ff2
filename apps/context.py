"""
Composition root: picks one repository backend for every domain and wires
Repository -> Service for each. Routes reach services through the context
stored on ``app.state``; nothing here is module-level state.
"""

from dataclasses import dataclass
from typing import Callable, Optional
from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.mysql_driver import MySQLDriver
from .breeder.fixture_repository import FixtureBreederRepository
from .breeder.repository import MySQLBreederRepository
from .breeder.service import BreederService
from .cat.fixture_repository import FixtureCatRepository
from .cat.repository import MySQLCatRepository
from .cat.service import CatService
from .dog.fixture_repository import FixtureDogRepository
from .dog.repository import MySQLDogRepository
from .dog.service import DogService

BACKEND_MYSQL = "mysql"
BACKEND_FIXTURE = "fixture"


@dataclass
class AppContext:
    dog_service: DogService
    cat_service: CatService
    breeder_service: BreederService
    driver: Optional[MySQLDriver] = None


def build_context(
    backend: str,
    session_factory: Optional[Callable[[], AsyncSession]] = None,
    timeout: Optional[float] = None,
    driver: Optional[MySQLDriver] = None,
) -> AppContext:
    """Build services for all three domains over the chosen backend."""
    if backend == BACKEND_FIXTURE:
        dog_repo = FixtureDogRepository()
        cat_repo = FixtureCatRepository()
        breeder_repo = FixtureBreederRepository()
    elif backend == BACKEND_MYSQL:
        if session_factory is None and driver is not None:
            session_factory = driver.session_factory
        if session_factory is None:
            raise ValueError("The mysql backend needs a session factory or driver")
        dog_repo = MySQLDogRepository(session_factory, timeout)
        cat_repo = MySQLCatRepository(session_factory, timeout)
        breeder_repo = MySQLBreederRepository(session_factory, timeout)
    else:
        raise ValueError(f"Unknown repository backend: {backend}")

    return AppContext(
        dog_service=DogService(dog_repo),
        cat_service=CatService(cat_repo),
        breeder_service=BreederService(breeder_repo),
        driver=driver,
    )


def get_context(request: Request) -> AppContext:
    """Dependency: the context the running app was built with."""
    return request.app.state.context
