"""PostgreSQL implementation of ShipRepository."""

from __future__ import annotations

from datetime import timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlalchemy.orm import InstrumentedAttribute, Session

from space_registry.domain.query import AtLeast, AtMost, Between, Contains, Equals, Predicate, QueryPlan
from space_registry.domain.ship import Ship
from space_registry.infra.db.models.ship import ShipRow
from space_registry.ports.ship_repository import ShipRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


# Domain field name -> mapped column. Closed on purpose: plans only reference these.
COLUMNS: dict[str, InstrumentedAttribute[Any]] = {
    "id": ShipRow.id,
    "name": ShipRow.name,
    "planet": ShipRow.planet,
    "ship_type": ShipRow.ship_type,
    "production_date": ShipRow.production_date,
    "is_used": ShipRow.is_used,
    "speed": ShipRow.speed,
    "crew_size": ShipRow.crew_size,
    "rating": ShipRow.rating,
}


class PostgresShipRepository(ShipRepository):
    """
    PostgreSQL implementation of ShipRepository.

    - Translates plan predicates into SQL WHERE clauses
    - Sorts with ORDER BY ... ASC, pages with OFFSET/LIMIT
    - Flushes writes; commit/rollback belongs to the session owner
    - Converts ShipRow (infrastructure) to Ship (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def execute_plan(self, plan: QueryPlan) -> list[Ship]:
        query = self._build_query(plan)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, ship_id: int) -> Ship | None:
        row = self._session.get(ShipRow, ship_id)
        return self._to_domain(row) if row else None

    def save(self, ship: Ship) -> Ship:
        if ship.id is None:
            row = ShipRow()
            self._session.add(row)
        else:
            row = self._session.get(ShipRow, ship.id)
            if row is None:
                row = ShipRow(id=ship.id)
                self._session.add(row)

        row.name = ship.name
        row.planet = ship.planet
        row.ship_type = ship.ship_type
        row.production_date = ship.production_date
        row.is_used = 1 if ship.is_used else 0
        row.speed = ship.speed
        row.crew_size = ship.crew_size
        row.rating = ship.rating

        # Flush so the database assigns the id before we read it back
        self._session.flush()
        return self._to_domain(row)

    def delete(self, ship: Ship) -> None:
        row = self._session.get(ShipRow, ship.id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    def _build_query(self, plan: QueryPlan) -> Select[tuple[ShipRow]]:
        """
        Build the SELECT for a plan.

        Args:
            plan: Query plan to translate

        Returns:
            SQLAlchemy select statement with WHERE, ORDER BY, OFFSET and LIMIT applied
        """
        query = select(ShipRow)

        for predicate in plan.predicates:
            query = query.where(self._to_clause(predicate))

        if plan.order_by is not None:
            query = query.order_by(COLUMNS[plan.order_by.field_name].asc())

        if plan.limit is not None:
            query = query.offset(plan.offset or 0).limit(plan.limit)

        return query

    @staticmethod
    def _to_clause(predicate: Predicate) -> ColumnElement[bool]:
        column = COLUMNS[predicate.field]

        if isinstance(predicate, Contains):
            # autoescape: '%' and '_' in the filter text match literally
            return column.contains(predicate.text, autoescape=True)
        if isinstance(predicate, Equals):
            return column == predicate.value
        if isinstance(predicate, Between):
            return column.between(predicate.low, predicate.high)
        if isinstance(predicate, AtLeast):
            return column >= predicate.bound
        if isinstance(predicate, AtMost):
            return column <= predicate.bound

        raise TypeError(f"Unsupported predicate: {predicate!r}")

    @staticmethod
    def _to_domain(row: ShipRow) -> Ship:
        """Convert database model (ShipRow) to domain entity (Ship)."""
        return Ship(
            id=row.id,
            name=row.name,
            planet=row.planet,
            ship_type=row.ship_type,
            production_date=row.production_date.astimezone(timezone.utc),
            is_used=bool(row.is_used),
            speed=row.speed,
            crew_size=row.crew_size,
            rating=row.rating,
        )
