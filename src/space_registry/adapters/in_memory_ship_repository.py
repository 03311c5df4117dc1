from __future__ import annotations

from dataclasses import replace

from space_registry.domain.query import QueryPlan
from space_registry.domain.ship import Ship
from space_registry.ports.ship_repository import ShipRepository


class InMemoryShipRepository(ShipRepository):
    """
    Canonical contract implementation for tests.

    - Stores ships in insertion order (the natural order)
    - Applies AND-semantics filtering
    - Sorts AFTER filtering, paging AFTER sorting
    - Assigns increasing integer ids on insert
    """

    def __init__(self, ships: list[Ship] | None = None) -> None:
        self._ships: dict[int, Ship] = {}
        self._next_id = 1
        for ship in ships or []:
            self.save(ship)

    def execute_plan(self, plan: QueryPlan) -> list[Ship]:
        # Trust that the plan was built from validated parameters (contract programming)
        matches = [ship for ship in self._ships.values() if plan.matches(ship)]

        if plan.order_by is not None:
            field = plan.order_by.field_name
            matches.sort(key=lambda ship: getattr(ship, field))

        if plan.limit is None:
            return matches

        start = plan.offset or 0
        return matches[start : start + plan.limit]

    def find_by_id(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    def save(self, ship: Ship) -> Ship:
        if ship.id is None:
            ship = replace(ship, id=self._next_id)
        self._next_id = max(self._next_id, ship.id + 1)
        self._ships[ship.id] = ship
        return ship

    def delete(self, ship: Ship) -> None:
        self._ships.pop(ship.id, None)
