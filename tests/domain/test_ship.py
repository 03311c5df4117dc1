"""Tests for the ship entity helpers."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from space_registry.domain.ship import (
    Ship,
    ShipDraft,
    ShipOrder,
    ShipType,
    from_epoch_millis,
    to_epoch_millis,
)


def test_epoch_millis_of_year_3000() -> None:
    assert to_epoch_millis(datetime(3000, 1, 1, tzinfo=timezone.utc)) == 32_503_680_000_000


def test_epoch_millis_keeps_milliseconds() -> None:
    moment = datetime(2950, 6, 15, 12, 30, 45, 123_000, tzinfo=timezone.utc)

    assert from_epoch_millis(to_epoch_millis(moment)) == moment


def test_from_epoch_millis_is_utc() -> None:
    assert from_epoch_millis(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert from_epoch_millis(0).tzinfo is timezone.utc


def test_order_from_key_is_case_insensitive() -> None:
    assert ShipOrder.from_key("date") is ShipOrder.DATE
    assert ShipOrder.from_key("DATE") is ShipOrder.DATE
    assert ShipOrder.from_key("production_date") is None


def test_ship_type_members() -> None:
    assert [t.value for t in ShipType] == ["TRANSPORT", "MILITARY", "MERCHANT"]


def test_ship_is_immutable() -> None:
    ship = Ship(
        id=1,
        name="Eagle",
        planet="Moon",
        ship_type=ShipType.TRANSPORT,
        production_date=datetime(3000, 1, 1, tzinfo=timezone.utc),
        is_used=False,
        speed=0.5,
        crew_size=2,
        rating=2.0,
    )

    with pytest.raises(FrozenInstanceError):
        ship.rating = 5.0  # type: ignore[misc]


def test_draft_fields_default_to_absent() -> None:
    draft = ShipDraft()

    assert draft.name is None
    assert draft.is_used is None
    assert draft.production_date is None
