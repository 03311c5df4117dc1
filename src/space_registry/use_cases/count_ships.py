from __future__ import annotations

from space_registry.domain.query import ShipCriteria
from space_registry.ports.ship_repository import ShipRepository
from space_registry.use_cases.search_ships import SearchShips


class CountShips:
    """
    Number of ships a listing with the same criteria returns.

    Paging parameters count too: a paged request counts the ships on that page.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._search = SearchShips(ship_repository)

    def execute(self, criteria: ShipCriteria) -> int:
        return len(self._search.execute(criteria))
