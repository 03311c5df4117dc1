from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(Enum):
    """Closed mapping of sort keys to ship fields."""

    ID = "id"
    SPEED = "speed"
    DATE = "production_date"
    RATING = "rating"

    @property
    def field_name(self) -> str:
        return self.value

    @classmethod
    def from_key(cls, key: str) -> ShipOrder | None:
        """Resolve a client-supplied order key by member name (case-insensitive)."""
        return cls.__members__.get(key.upper())


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch for an aware datetime."""
    delta = moment - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_millis(millis: int) -> datetime:
    """UTC datetime for a millisecond epoch timestamp."""
    # timedelta arithmetic instead of fromtimestamp: year 3019 is past most platform limits
    return EPOCH + timedelta(milliseconds=millis)


@dataclass(frozen=True)
class Ship:
    id: int | None
    name: str
    planet: str
    ship_type: ShipType
    production_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float


@dataclass(frozen=True, slots=True)
class ShipDraft:
    """
    Write-side payload for creating or partially updating a ship.

    Every field is independently optional. On create a missing field fails
    validation; on update a missing field leaves the stored value unchanged.
    ``ship_type`` stays raw text so an unknown variant is reported as a bad
    request instead of failing at the boundary.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: str | None = None
    production_date: datetime | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None
