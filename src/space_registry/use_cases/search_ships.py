from __future__ import annotations

import logging

from space_registry.domain.query import QueryPlan, ShipCriteria, build_query_plan
from space_registry.domain.ship import Ship
from space_registry.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


class SearchShips:
    """
    Filtered, sorted, paginated ship listing.

    Invalid or absent parameters are dropped while building the plan, so
    this use case never raises on its own. Store failures propagate.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._ship_repository = ship_repository

    def execute(self, criteria: ShipCriteria) -> list[Ship]:
        plan = build_query_plan(criteria)
        self._log_plan(plan)
        return self._ship_repository.execute_plan(plan)

    @staticmethod
    def _log_plan(plan: QueryPlan) -> None:
        logger.debug(
            "Ship query plan built",
            extra={
                "predicates": [type(p).__name__ + ":" + p.field for p in plan.predicates],
                "order_by": plan.order_by.name if plan.order_by else None,
                "offset": plan.offset,
                "limit": plan.limit,
            },
        )
