"""
Field validators for ship attributes.

Every ``is_valid_*`` predicate is total: it never raises and treats ``None``
as invalid. Callers decide what a failure means. Listing drops the offending
filter, writes reject the whole request. ``validate_id`` is the exception and
raises ``BadRequestError`` directly.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any, Callable

from space_registry.domain.errors import BadRequestError
from space_registry.domain.ship import ShipOrder, ShipType, to_epoch_millis


# ==============================================================================
# Fixed Boundaries
# ==============================================================================

MAX_TEXT_LENGTH = 50
MAX_CREW_SIZE = 9999
MAX_SPEED = 0.99

# LIMIT/OFFSET are signed 64-bit integers in the store
MAX_PAGE_VALUE = 2**63 - 1

# Computed once at import; production dates must fall strictly between them
PRODUCTION_DATE_MIN = datetime(2800, 2, 1, tzinfo=timezone.utc)
PRODUCTION_DATE_MAX = datetime(3019, 2, 1, tzinfo=timezone.utc)
PRODUCTION_DATE_MIN_MS = to_epoch_millis(PRODUCTION_DATE_MIN)
PRODUCTION_DATE_MAX_MS = to_epoch_millis(PRODUCTION_DATE_MAX)
LAST_PRODUCTION_YEAR = PRODUCTION_DATE_MAX.year


# ==============================================================================
# Predicates
# ==============================================================================


def is_valid_name(value: str | None) -> bool:
    """Text rule shared by name, planet and ship type."""
    return value is not None and value != "" and len(value) < MAX_TEXT_LENGTH


def is_valid_ship_type(value: str | None) -> bool:
    return is_valid_name(value) and value in ShipType.__members__


def is_valid_crew_size(value: int | None) -> bool:
    return value is not None and 0 < value < MAX_CREW_SIZE


def is_valid_speed(value: float | None) -> bool:
    # Upper bound only: negative speeds are accepted
    return value is not None and value < MAX_SPEED


def is_valid_production_date(value: int | None) -> bool:
    """Epoch millis strictly inside the production window."""
    return value is not None and PRODUCTION_DATE_MIN_MS < value < PRODUCTION_DATE_MAX_MS


def is_valid_rating(value: float | None) -> bool:
    return value is not None and value < sys.float_info.max


def is_valid_page_number(value: int | None) -> bool:
    return value is not None and 0 <= value <= MAX_PAGE_VALUE


def is_valid_page_size(value: int | None) -> bool:
    return value is not None and 0 <= value <= MAX_PAGE_VALUE


def is_valid_order(value: str | None) -> bool:
    return bool(value) and ShipOrder.from_key(value) is not None


# ==============================================================================
# Strict Checks
# ==============================================================================


def validate_id(ship_id: int | None) -> int:
    """
    Ensure a ship id is a positive integer.

    Returns:
        The id, unchanged

    Raises:
        BadRequestError: If the id is missing or not positive
    """
    if ship_id is None or ship_id <= 0:
        raise BadRequestError(
            errors=[
                {
                    "field": "id",
                    "message": "Must be a positive integer",
                    "code": "INVALID_ID",
                }
            ]
        )
    return ship_id


def require(field: str, value: Any, is_valid: Callable[[Any], bool], message: str) -> None:
    """
    Reject a write when one field fails its validator.

    Raises:
        BadRequestError: Naming the offending field
    """
    if not is_valid(value):
        raise BadRequestError(
            errors=[
                {
                    "field": field,
                    "message": message,
                    "code": "INVALID_VALUE",
                }
            ]
        )


def is_valid_production_datetime(value: datetime | None) -> bool:
    return value is not None and is_valid_production_date(to_epoch_millis(value))


# Write-side checks in the order they are applied: (field, predicate, message)
WRITE_FIELD_RULES: tuple[tuple[str, Callable[[Any], bool], str], ...] = (
    ("name", is_valid_name, f"Must be non-empty and shorter than {MAX_TEXT_LENGTH} characters"),
    ("planet", is_valid_name, f"Must be non-empty and shorter than {MAX_TEXT_LENGTH} characters"),
    ("ship_type", is_valid_ship_type, f"Must be one of {', '.join(ShipType.__members__)}"),
    (
        "production_date",
        is_valid_production_datetime,
        f"Must fall strictly between {PRODUCTION_DATE_MIN.date()} and {PRODUCTION_DATE_MAX.date()}",
    ),
    ("speed", is_valid_speed, f"Must be less than {MAX_SPEED}"),
    ("crew_size", is_valid_crew_size, f"Must be greater than 0 and less than {MAX_CREW_SIZE}"),
)
