"""
Listing criteria and the query plan they compile to.

``build_query_plan`` folds an ordered tuple of rules over one ``ShipCriteria``.
Each rule looks at the parameters it owns and yields at most one predicate.
Parameters that are absent or fail their validator are dropped, never
reported: listing is lenient on read.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Union

from space_registry.domain.ship import Ship, ShipOrder, ShipType, from_epoch_millis
from space_registry.domain.validators import (
    MAX_PAGE_VALUE,
    is_valid_crew_size,
    is_valid_name,
    is_valid_order,
    is_valid_page_number,
    is_valid_page_size,
    is_valid_production_date,
    is_valid_rating,
    is_valid_ship_type,
    is_valid_speed,
)


# Subtracted from the upper production-date bound when both bounds are given,
# compensating for the day/timezone offset of stored production dates
PRODUCTION_DATE_UPPER_ADJUSTMENT = timedelta(milliseconds=3_600_001)


# ==============================================================================
# Criteria
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ShipCriteria:
    """Optional filter, sort and page parameters of one listing request."""

    name: str | None = None
    planet: str | None = None
    ship_type: str | None = None
    after: int | None = None  # epoch millis, lower production-date bound
    before: int | None = None  # epoch millis, upper production-date bound
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    order: str | None = None
    page_number: int | None = None
    page_size: int | None = None


# ==============================================================================
# Predicates
# ==============================================================================


def _field_value(ship: Ship, field: str) -> Any:
    return getattr(ship, field)


@dataclass(frozen=True, slots=True)
class Contains:
    """Case-sensitive substring match."""

    field: str
    text: str

    def matches(self, ship: Ship) -> bool:
        return self.text in _field_value(ship, self.field)


@dataclass(frozen=True, slots=True)
class Equals:
    field: str
    value: Any

    def matches(self, ship: Ship) -> bool:
        return _field_value(ship, self.field) == self.value


@dataclass(frozen=True, slots=True)
class Between:
    """Closed interval, inclusive on both ends."""

    field: str
    low: Any
    high: Any

    def matches(self, ship: Ship) -> bool:
        return self.low <= _field_value(ship, self.field) <= self.high


@dataclass(frozen=True, slots=True)
class AtLeast:
    field: str
    bound: Any

    def matches(self, ship: Ship) -> bool:
        return _field_value(ship, self.field) >= self.bound


@dataclass(frozen=True, slots=True)
class AtMost:
    field: str
    bound: Any

    def matches(self, ship: Ship) -> bool:
        return _field_value(ship, self.field) <= self.bound


Predicate = Union[Contains, Equals, Between, AtLeast, AtMost]


@dataclass(frozen=True, slots=True)
class QueryPlan:
    """
    Store-independent description of one listing.

    predicates are ANDed together. offset and limit are either both set
    or both None (no paging, the full filtered set).
    """

    predicates: tuple[Predicate, ...] = ()
    order_by: ShipOrder | None = None
    offset: int | None = None
    limit: int | None = None

    def matches(self, ship: Ship) -> bool:
        return all(predicate.matches(ship) for predicate in self.predicates)


# ==============================================================================
# Rules
# ==============================================================================


Rule = Callable[[ShipCriteria], Union[Predicate, None]]


def _range(
    field: str,
    low: Any,
    high: Any,
    is_valid: Callable[[Any], bool],
) -> Predicate | None:
    """Three-way range policy: both bounds, lower only, upper only, or nothing."""
    low_ok = is_valid(low)
    high_ok = is_valid(high)

    if low_ok and high_ok:
        return Between(field, low, high)
    if low_ok:
        return AtLeast(field, low)
    if high_ok:
        return AtMost(field, high)
    return None


def _name_rule(criteria: ShipCriteria) -> Predicate | None:
    if is_valid_name(criteria.name):
        return Contains("name", criteria.name)
    return None


def _planet_rule(criteria: ShipCriteria) -> Predicate | None:
    if is_valid_name(criteria.planet):
        return Contains("planet", criteria.planet)
    return None


def _ship_type_rule(criteria: ShipCriteria) -> Predicate | None:
    if is_valid_ship_type(criteria.ship_type):
        return Equals("ship_type", ShipType[criteria.ship_type])
    return None


def _production_date_rule(criteria: ShipCriteria) -> Predicate | None:
    after_ok = is_valid_production_date(criteria.after)
    before_ok = is_valid_production_date(criteria.before)

    if after_ok and before_ok:
        return Between(
            "production_date",
            from_epoch_millis(criteria.after),
            from_epoch_millis(criteria.before) - PRODUCTION_DATE_UPPER_ADJUSTMENT,
        )
    if after_ok:
        return AtLeast("production_date", from_epoch_millis(criteria.after))
    if before_ok:
        # A lone upper bound is used as given, without the adjustment
        return AtMost("production_date", from_epoch_millis(criteria.before))
    return None


def _is_used_rule(criteria: ShipCriteria) -> Predicate | None:
    if criteria.is_used is None:
        return None
    # Persisted as an integer flag
    return Equals("is_used", 1 if criteria.is_used else 0)


def _crew_size_rule(criteria: ShipCriteria) -> Predicate | None:
    return _range("crew_size", criteria.min_crew_size, criteria.max_crew_size, is_valid_crew_size)


def _speed_rule(criteria: ShipCriteria) -> Predicate | None:
    return _range("speed", criteria.min_speed, criteria.max_speed, is_valid_speed)


def _rating_rule(criteria: ShipCriteria) -> Predicate | None:
    return _range("rating", criteria.min_rating, criteria.max_rating, is_valid_rating)


RULES: tuple[Rule, ...] = (
    _name_rule,
    _planet_rule,
    _ship_type_rule,
    _production_date_rule,
    _is_used_rule,
    _crew_size_rule,
    _speed_rule,
    _rating_rule,
)


# ==============================================================================
# Builder
# ==============================================================================


def _order_by(criteria: ShipCriteria) -> ShipOrder | None:
    if is_valid_order(criteria.order):
        return ShipOrder.from_key(criteria.order)
    return None


def _paging(criteria: ShipCriteria) -> tuple[int | None, int | None]:
    """Return (offset, limit), or (None, None) when paging is not requested."""
    page_number = criteria.page_number
    page_size = criteria.page_size

    if not (is_valid_page_size(page_size) and is_valid_page_number(page_number)):
        return None, None

    if page_number * page_size > MAX_PAGE_VALUE:
        # The offset would not fit the store's LIMIT/OFFSET range
        return None, None

    if page_number == 0:
        # Historical special case: the first page offsets by page_number itself.
        # Numerically the same as page_number * page_size, kept on purpose.
        return page_number, page_size
    return page_number * page_size, page_size


def build_query_plan(criteria: ShipCriteria, rules: tuple[Rule, ...] = RULES) -> QueryPlan:
    """
    Compile listing criteria into a query plan.

    Args:
        criteria: Raw, unvalidated listing parameters
        rules: Ordered predicate rules (defaults to RULES)

    Returns:
        QueryPlan with predicates in rule order, optional ascending sort key,
        and optional offset/limit
    """
    predicates = tuple(
        predicate for predicate in (rule(criteria) for rule in rules) if predicate is not None
    )
    offset, limit = _paging(criteria)

    return QueryPlan(
        predicates=predicates,
        order_by=_order_by(criteria),
        offset=offset,
        limit=limit,
    )
