"""
Test suite for the listing query plan builder.

Each rule is exercised on its own, then the fold as a whole:
- absent or invalid parameters are dropped, never raised
- range parameters follow the both / lower-only / upper-only policy
- production dates get the fixed adjustment only when both bounds are given
- order keys resolve through the closed ShipOrder mapping
- paging yields offset/limit only when both parameters are valid
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from space_registry.domain.query import (
    PRODUCTION_DATE_UPPER_ADJUSTMENT,
    RULES,
    AtLeast,
    AtMost,
    Between,
    Contains,
    Equals,
    QueryPlan,
    ShipCriteria,
    build_query_plan,
)
from space_registry.domain.ship import ShipOrder, ShipType, from_epoch_millis, to_epoch_millis


YEAR_2900 = datetime(2900, 1, 1, tzinfo=timezone.utc)
YEAR_3000 = datetime(3000, 1, 1, tzinfo=timezone.utc)
AFTER_MS = to_epoch_millis(YEAR_2900)
BEFORE_MS = to_epoch_millis(YEAR_3000)


# ==============================================================================
# Empty and Invalid Criteria
# ==============================================================================


def test_empty_criteria_builds_empty_plan() -> None:
    assert build_query_plan(ShipCriteria()) == QueryPlan()


def test_empty_plan_has_no_paging_or_order() -> None:
    plan = build_query_plan(ShipCriteria())

    assert plan.predicates == ()
    assert plan.order_by is None
    assert plan.offset is None
    assert plan.limit is None


@pytest.mark.parametrize(
    "criteria",
    [
        ShipCriteria(name=""),
        ShipCriteria(planet="p" * 50),
        ShipCriteria(ship_type="CRUISER"),
        ShipCriteria(after=0, before=1),
        ShipCriteria(min_crew_size=0, max_crew_size=10_000),
        ShipCriteria(min_speed=0.99, max_speed=5.0),
        ShipCriteria(order="NAME"),
        ShipCriteria(page_number=-1, page_size=10),
        ShipCriteria(page_number=1),
    ],
)
def test_invalid_only_criteria_builds_same_plan_as_empty(criteria: ShipCriteria) -> None:
    assert build_query_plan(criteria) == build_query_plan(ShipCriteria())


# ==============================================================================
# Text and Exact Filters
# ==============================================================================


def test_name_and_planet_are_substring_filters() -> None:
    plan = build_query_plan(ShipCriteria(name="Ori", planet="Mar"))

    assert plan.predicates == (Contains("name", "Ori"), Contains("planet", "Mar"))


def test_ship_type_is_exact_match_on_enum() -> None:
    plan = build_query_plan(ShipCriteria(ship_type="MILITARY"))

    assert plan.predicates == (Equals("ship_type", ShipType.MILITARY),)


@pytest.mark.parametrize(("flag", "encoded"), [(True, 1), (False, 0)])
def test_is_used_is_encoded_as_integer_flag(flag: bool, encoded: int) -> None:
    plan = build_query_plan(ShipCriteria(is_used=flag))

    assert plan.predicates == (Equals("is_used", encoded),)


# ==============================================================================
# Production Date
# ==============================================================================


def test_both_dates_subtract_adjustment_from_upper_bound() -> None:
    plan = build_query_plan(ShipCriteria(after=AFTER_MS, before=BEFORE_MS))

    assert plan.predicates == (
        Between(
            "production_date",
            YEAR_2900,
            YEAR_3000 - timedelta(milliseconds=3_600_001),
        ),
    )
    assert PRODUCTION_DATE_UPPER_ADJUSTMENT == timedelta(milliseconds=3_600_001)


def test_lone_upper_date_is_used_raw() -> None:
    plan = build_query_plan(ShipCriteria(before=BEFORE_MS))

    assert plan.predicates == (AtMost("production_date", YEAR_3000),)


def test_lone_lower_date() -> None:
    plan = build_query_plan(ShipCriteria(after=AFTER_MS))

    assert plan.predicates == (AtLeast("production_date", YEAR_2900),)


def test_invalid_lower_date_leaves_raw_upper_bound() -> None:
    too_early = to_epoch_millis(datetime(2500, 1, 1, tzinfo=timezone.utc))

    plan = build_query_plan(ShipCriteria(after=too_early, before=BEFORE_MS))

    assert plan.predicates == (AtMost("production_date", from_epoch_millis(BEFORE_MS)),)


# ==============================================================================
# Numeric Ranges
# ==============================================================================


def test_crew_size_range_policy() -> None:
    both = build_query_plan(ShipCriteria(min_crew_size=10, max_crew_size=100))
    lower = build_query_plan(ShipCriteria(min_crew_size=10, max_crew_size=10_000))
    upper = build_query_plan(ShipCriteria(min_crew_size=0, max_crew_size=100))

    assert both.predicates == (Between("crew_size", 10, 100),)
    assert lower.predicates == (AtLeast("crew_size", 10),)
    assert upper.predicates == (AtMost("crew_size", 100),)


def test_speed_lower_bound_may_be_negative() -> None:
    plan = build_query_plan(ShipCriteria(min_speed=-5.0, max_speed=0.99))

    assert plan.predicates == (AtLeast("speed", -5.0),)


def test_speed_closed_interval() -> None:
    plan = build_query_plan(ShipCriteria(min_speed=0.1, max_speed=0.5))

    assert plan.predicates == (Between("speed", 0.1, 0.5),)


def test_rating_range_policy() -> None:
    assert build_query_plan(ShipCriteria(min_rating=1.0)).predicates == (AtLeast("rating", 1.0),)
    assert build_query_plan(ShipCriteria(max_rating=3.5)).predicates == (AtMost("rating", 3.5),)
    assert build_query_plan(ShipCriteria(min_rating=1.0, max_rating=3.5)).predicates == (
        Between("rating", 1.0, 3.5),
    )


# ==============================================================================
# Rule Order
# ==============================================================================


def test_predicates_follow_rule_order() -> None:
    criteria = ShipCriteria(
        max_rating=10.0,
        min_speed=0.1,
        max_crew_size=50,
        is_used=False,
        before=BEFORE_MS,
        ship_type="MERCHANT",
        planet="Earth",
        name="Eagle",
    )

    plan = build_query_plan(criteria)

    assert [p.field for p in plan.predicates] == [
        "name",
        "planet",
        "ship_type",
        "production_date",
        "is_used",
        "crew_size",
        "speed",
        "rating",
    ]
    assert len(RULES) == 8


def test_custom_rules_replace_defaults() -> None:
    plan = build_query_plan(ShipCriteria(name="Eagle", min_speed=0.1), rules=())

    assert plan.predicates == ()


# ==============================================================================
# Ordering
# ==============================================================================


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("ID", ShipOrder.ID),
        ("SPEED", ShipOrder.SPEED),
        ("speed", ShipOrder.SPEED),
        ("DATE", ShipOrder.DATE),
        ("rating", ShipOrder.RATING),
    ],
)
def test_order_key_resolves_to_ship_order(key: str, expected: ShipOrder) -> None:
    assert build_query_plan(ShipCriteria(order=key)).order_by is expected


def test_order_maps_to_domain_fields() -> None:
    assert ShipOrder.ID.field_name == "id"
    assert ShipOrder.SPEED.field_name == "speed"
    assert ShipOrder.DATE.field_name == "production_date"
    assert ShipOrder.RATING.field_name == "rating"


@pytest.mark.parametrize("key", ["", "NAME", "crewSize"])
def test_unknown_order_key_is_dropped(key: str) -> None:
    assert build_query_plan(ShipCriteria(order=key)).order_by is None


# ==============================================================================
# Paging
# ==============================================================================


def test_paging_offset_is_page_number_times_size() -> None:
    plan = build_query_plan(ShipCriteria(page_number=2, page_size=10))

    assert plan.offset == 20
    assert plan.limit == 10


def test_first_page_starts_at_zero() -> None:
    plan = build_query_plan(ShipCriteria(page_number=0, page_size=3))

    assert plan.offset == 0
    assert plan.limit == 3


def test_zero_page_size_is_a_valid_empty_page() -> None:
    plan = build_query_plan(ShipCriteria(page_number=3, page_size=0))

    assert plan.offset == 0
    assert plan.limit == 0


@pytest.mark.parametrize(
    "criteria",
    [
        ShipCriteria(page_size=10),
        ShipCriteria(page_number=2),
        ShipCriteria(page_number=-1, page_size=10),
        ShipCriteria(page_number=1, page_size=-10),
        ShipCriteria(page_number=1, page_size=10**20),
        ShipCriteria(page_number=10**20, page_size=1),
        ShipCriteria(page_number=2**62, page_size=4),
    ],
)
def test_incomplete_or_invalid_paging_is_dropped(criteria: ShipCriteria) -> None:
    plan = build_query_plan(criteria)

    assert plan.offset is None
    assert plan.limit is None


def test_largest_storable_page_is_kept() -> None:
    plan = build_query_plan(ShipCriteria(page_number=1, page_size=2**63 - 1))

    assert plan.offset == 2**63 - 1
    assert plan.limit == 2**63 - 1
