from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext

from space_registry.domain.validators import LAST_PRODUCTION_YEAR


RATING_FACTOR = Decimal("80")
USED_FACTOR = Decimal("0.5")
NEW_FACTOR = Decimal("1")

# Enough significant digits to hold any finite float with 2 decimals
# (the largest is ~1.8e308)
DECIMAL_PRECISION = 400


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round a float to ``places`` decimals, exact midpoints away from zero.

    The float is converted to Decimal from its exact binary value, so
    ``round_half_up(0.125)`` is 0.13 while ``round_half_up(1.005)`` is 1.0
    (1.005 is stored as 1.00499...).
    """
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_rating(is_used: bool, speed: float, production_date: datetime) -> float:
    """
    Derive a ship's rating.

    rating = round2(80 * speed * usage / (3019 - production_year + 1))

    where usage is 0.5 for used ships and 1 otherwise, and production_year
    is the UTC calendar year. Callers validate production_date first, which
    keeps the denominator >= 1.
    """
    usage = USED_FACTOR if is_used else NEW_FACTOR
    production_year = production_date.astimezone(timezone.utc).year
    age_span = LAST_PRODUCTION_YEAR - production_year + 1
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        precise = RATING_FACTOR * Decimal(speed) * usage / Decimal(age_span)
        return float(precise.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
