from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from space_registry.domain.rating import compute_rating, round_half_up
from space_registry.domain.ship import Ship, ShipDraft, ShipType
from space_registry.domain.validators import WRITE_FIELD_RULES, require
from space_registry.ports.ship_repository import ShipRepository
from space_registry.use_cases.get_ship_by_id import load_ship

logger = logging.getLogger(__name__)


class UpdateShip:
    """
    Partially update a stored ship.

    Only fields present in the draft are validated and applied. The whole
    request is rejected on the first invalid field before anything is
    persisted. The rating is recomputed from the resulting speed, usage
    flag and production date on every update.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._ship_repository = ship_repository

    def execute(self, ship_id: int, draft: ShipDraft) -> Ship:
        """
        Raises:
            BadRequestError: If ship_id is not positive or a present field is invalid
            NotFoundError: If ship with given ID doesn't exist
        """
        ship = load_ship(self._ship_repository, ship_id)

        changes: dict[str, Any] = {}
        for field, is_valid, message in WRITE_FIELD_RULES:
            value = getattr(draft, field)
            if value is None:
                continue
            require(field, value, is_valid, message)
            changes[field] = value

        if "ship_type" in changes:
            changes["ship_type"] = ShipType[changes["ship_type"]]
        if "speed" in changes:
            changes["speed"] = round_half_up(changes["speed"])
        # A boolean has nothing to validate
        if draft.is_used is not None:
            changes["is_used"] = draft.is_used

        updated = replace(ship, **changes)
        updated = replace(
            updated,
            rating=compute_rating(updated.is_used, updated.speed, updated.production_date),
        )

        stored = self._ship_repository.save(updated)
        logger.info(
            "Ship updated",
            extra={"ship_id": stored.id, "fields": sorted(changes), "rating": stored.rating},
        )
        return stored
