from __future__ import annotations

import logging

from space_registry.domain.rating import compute_rating, round_half_up
from space_registry.domain.ship import Ship, ShipDraft, ShipType
from space_registry.domain.validators import WRITE_FIELD_RULES, require
from space_registry.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


class CreateShip:
    """
    Validate, derive and persist a new ship.

    Derivation policy:
    - is_used defaults to False when omitted
    - speed is stored rounded to 2 decimals (ROUND_HALF_UP)
    - rating is computed from the rounded speed, never taken from the client
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._ship_repository = ship_repository

    def execute(self, draft: ShipDraft) -> Ship:
        """
        Raises:
            BadRequestError: On the first missing or invalid field; nothing is persisted
        """
        for field, is_valid, message in WRITE_FIELD_RULES:
            require(field, getattr(draft, field), is_valid, message)

        is_used = draft.is_used if draft.is_used is not None else False
        speed = round_half_up(draft.speed)

        ship = Ship(
            id=None,
            name=draft.name,
            planet=draft.planet,
            ship_type=ShipType[draft.ship_type],
            production_date=draft.production_date,
            is_used=is_used,
            speed=speed,
            crew_size=draft.crew_size,
            rating=compute_rating(is_used, speed, draft.production_date),
        )

        stored = self._ship_repository.save(ship)
        logger.info("Ship created", extra={"ship_id": stored.id, "rating": stored.rating})
        return stored
