from __future__ import annotations

from abc import ABC, abstractmethod

from space_registry.domain.query import QueryPlan
from space_registry.domain.ship import Ship


class ShipRepository(ABC):
    """
    Port for ship persistence.

    Contract (Preconditions):
        - Query plans are built by build_query_plan and contain only valid parameters
        - Ships handed to save() have already been validated and derived by the caller
        - Implementations trust inputs and do not re-validate
    """

    @abstractmethod
    def execute_plan(self, plan: QueryPlan) -> list[Ship]:
        """
        Run a query plan.

        Applies the AND of all predicates, then the ascending sort (if any),
        then offset/limit (if any).

        Args:
            plan: Pre-built query plan

        Returns:
            Matching ships in plan order
        """
        ...

    @abstractmethod
    def find_by_id(self, ship_id: int) -> Ship | None: ...

    @abstractmethod
    def save(self, ship: Ship) -> Ship:
        """
        Insert (when ship.id is None) or update a ship.

        Returns:
            The stored ship, carrying its assigned id on insert
        """
        ...

    @abstractmethod
    def delete(self, ship: Ship) -> None: ...
