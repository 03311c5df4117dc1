from __future__ import annotations

from datetime import datetime
from typing import Callable, TypeVar

from space_registry.domain.errors import BadRequestError
from space_registry.domain.query import ShipCriteria
from space_registry.domain.ship import Ship, ShipDraft, from_epoch_millis, to_epoch_millis
from space_registry.entrypoints.http.dtos.ships import (
    ShipResponseDTO,
    ShipsSearchQueryDTO,
    ShipWriteDTO,
)

T = TypeVar("T")

_TRUE = {"true", "1"}
_FALSE = {"false", "0"}


def _lenient(parse: Callable[[str], T], raw: str | None) -> T | None:
    """Parse a query value, returning None when absent or malformed."""
    if raw is None:
        return None
    try:
        return parse(raw.strip())
    except ValueError:
        return None


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {raw}")


def _production_date(millis: int | None) -> datetime | None:
    if millis is None:
        return None
    try:
        return from_epoch_millis(millis)
    except OverflowError:
        raise BadRequestError(
            errors=[
                {
                    "field": "prod_date",
                    "message": f"Out of range: {millis}",
                    "code": "INVALID_VALUE",
                }
            ]
        )


class ShipMapper:
    """Maps between REST DTOs and domain models for ships."""

    @staticmethod
    def to_criteria(dto: ShipsSearchQueryDTO) -> ShipCriteria:
        """
        Converts query params to listing criteria.

        Numeric and boolean params are parsed leniently: garbage becomes None,
        which the query plan builder treats as an absent filter.
        """
        return ShipCriteria(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            after=_lenient(int, dto.after),
            before=_lenient(int, dto.before),
            is_used=_lenient(_parse_bool, dto.is_used),
            min_speed=_lenient(float, dto.min_speed),
            max_speed=_lenient(float, dto.max_speed),
            min_crew_size=_lenient(int, dto.min_crew_size),
            max_crew_size=_lenient(int, dto.max_crew_size),
            min_rating=_lenient(float, dto.min_rating),
            max_rating=_lenient(float, dto.max_rating),
            order=dto.order,
            page_number=_lenient(int, dto.page_number),
            page_size=_lenient(int, dto.page_size),
        )

    @staticmethod
    def to_draft(dto: ShipWriteDTO) -> ShipDraft:
        """Converts a write body to a domain draft (epoch millis → UTC datetime)."""
        return ShipDraft(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            production_date=_production_date(dto.prod_date),
            is_used=dto.is_used,
            speed=dto.speed,
            crew_size=dto.crew_size,
        )

    @staticmethod
    def to_response(ship: Ship) -> ShipResponseDTO:
        return ShipResponseDTO(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type.value,
            prod_date=to_epoch_millis(ship.production_date),
            is_used=ship.is_used,
            speed=ship.speed,
            crew_size=ship.crew_size,
            rating=ship.rating,
        )
