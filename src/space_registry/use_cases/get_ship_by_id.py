"""Get ship by ID use case."""

from __future__ import annotations

from space_registry.domain.errors import NotFoundError
from space_registry.domain.ship import Ship
from space_registry.domain.validators import validate_id
from space_registry.ports.ship_repository import ShipRepository


def load_ship(ship_repository: ShipRepository, ship_id: int) -> Ship:
    """
    Validate an id and fetch the ship it names.

    Raises:
        BadRequestError: If ship_id is not a positive integer
        NotFoundError: If no ship has that id
    """
    validate_id(ship_id)

    ship = ship_repository.find_by_id(ship_id)
    if ship is None:
        raise NotFoundError(resource="Ship", identifier=str(ship_id))

    return ship


class GetShipById:
    """
    Use case for retrieving a single ship by ID.

    Responsibilities:
    - Validate ship_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if the ship doesn't exist
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._ship_repository = ship_repository

    def execute(self, ship_id: int) -> Ship:
        """
        Execute the get ship by ID use case.

        Args:
            ship_id: Identifier of the ship

        Returns:
            The stored ship

        Raises:
            BadRequestError: If ship_id is not positive
            NotFoundError: If ship with given ID doesn't exist
        """
        return load_ship(self._ship_repository, ship_id)
