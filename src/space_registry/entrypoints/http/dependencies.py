"""
Dependency injection for FastAPI routes.

Sessions, repositories and use cases are built per request. Routes depend
on use case factories, which depend on get_ship_repository, so tests can
swap the store with a single dependency override.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from space_registry.adapters.postgres_ship_repository import PostgresShipRepository
from space_registry.infra.db.session import get_session
from space_registry.ports.ship_repository import ShipRepository
from space_registry.use_cases.count_ships import CountShips
from space_registry.use_cases.create_ship import CreateShip
from space_registry.use_cases.delete_ship import DeleteShip
from space_registry.use_cases.get_ship_by_id import GetShipById
from space_registry.use_cases.search_ships import SearchShips
from space_registry.use_cases.update_ship import UpdateShip


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    get_session() commits when the request succeeds, rolls back when it
    raises, and always closes the session.
    """
    with get_session() as session:
        yield session


def get_ship_repository(db: Session = Depends(get_db)) -> ShipRepository:
    return PostgresShipRepository(session=db)


def get_search_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> SearchShips:
    return SearchShips(ship_repository=repository)


def get_count_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CountShips:
    return CountShips(ship_repository=repository)


def get_get_ship_by_id_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> GetShipById:
    return GetShipById(ship_repository=repository)


def get_create_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CreateShip:
    return CreateShip(ship_repository=repository)


def get_update_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> UpdateShip:
    return UpdateShip(ship_repository=repository)


def get_delete_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> DeleteShip:
    return DeleteShip(ship_repository=repository)
