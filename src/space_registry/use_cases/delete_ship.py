from __future__ import annotations

import logging

from space_registry.ports.ship_repository import ShipRepository
from space_registry.use_cases.get_ship_by_id import load_ship

logger = logging.getLogger(__name__)


class DeleteShip:
    def __init__(self, ship_repository: ShipRepository) -> None:
        self._ship_repository = ship_repository

    def execute(self, ship_id: int) -> None:
        """
        Raises:
            BadRequestError: If ship_id is not positive
            NotFoundError: If ship with given ID doesn't exist
        """
        ship = load_ship(self._ship_repository, ship_id)
        self._ship_repository.delete(ship)
        logger.info("Ship deleted", extra={"ship_id": ship_id})
