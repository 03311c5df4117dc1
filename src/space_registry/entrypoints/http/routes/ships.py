from fastapi import APIRouter, Depends, Response, status

from space_registry.entrypoints.http.dependencies import (
    get_count_ships_use_case,
    get_create_ship_use_case,
    get_delete_ship_use_case,
    get_get_ship_by_id_use_case,
    get_search_ships_use_case,
    get_update_ship_use_case,
)
from space_registry.entrypoints.http.dtos.ships import (
    ShipCountResponseDTO,
    ShipResponseDTO,
    ShipsSearchQueryDTO,
    ShipWriteDTO,
)
from space_registry.entrypoints.http.error_responses import ErrorResponse
from space_registry.entrypoints.http.mappers.ship_mapper import ShipMapper
from space_registry.use_cases.count_ships import CountShips
from space_registry.use_cases.create_ship import CreateShip
from space_registry.use_cases.delete_ship import DeleteShip
from space_registry.use_cases.get_ship_by_id import GetShipById
from space_registry.use_cases.search_ships import SearchShips
from space_registry.use_cases.update_ship import UpdateShip


router = APIRouter(tags=["Ships"])

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid id or field value"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Ship not found"}}


@router.get(
    "/ships",
    response_model=list[ShipResponseDTO],
    summary="List ships",
    description="""
    List ships with optional filters, ordering and pagination.

    ## Filters
    - All filters use AND semantics
    - name/planet: case-sensitive substring
    - ship_type: exact match
    - after/before, min_/max_ speed, crew_size, rating: inclusive ranges
    - Invalid or unparsable filters are ignored, never rejected

    ## Ordering
    - order: ID, SPEED, DATE or RATING (ascending)

    ## Pagination
    - Applied only when both page_number and page_size are given
    - Offset = page_number × page_size

    ## Example
    ```
    GET /v1/ships?planet=Mars&max_speed=0.5&order=RATING&page_number=0&page_size=10
    ```
    """,
)
def list_ships(
    query: ShipsSearchQueryDTO = Depends(),
    use_case: SearchShips = Depends(get_search_ships_use_case),
) -> list[ShipResponseDTO]:
    """List ships following parse → execute → map → return."""
    ships = use_case.execute(ShipMapper.to_criteria(query))
    return [ShipMapper.to_response(ship) for ship in ships]


@router.get(
    "/ships/count",
    response_model=ShipCountResponseDTO,
    summary="Count ships",
    description="Number of ships the same listing request would return.",
)
def count_ships(
    query: ShipsSearchQueryDTO = Depends(),
    use_case: CountShips = Depends(get_count_ships_use_case),
) -> ShipCountResponseDTO:
    return ShipCountResponseDTO(count=use_case.execute(ShipMapper.to_criteria(query)))


@router.get(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Get ship",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def get_ship(
    ship_id: int,
    use_case: GetShipById = Depends(get_get_ship_by_id_use_case),
) -> ShipResponseDTO:
    return ShipMapper.to_response(use_case.execute(ship_id))


@router.post(
    "/ships",
    response_model=ShipResponseDTO,
    summary="Create ship",
    description="""
    Create a ship. name, planet, ship_type, prod_date, speed and crew_size
    are required; is_used defaults to false. speed is stored rounded to two
    decimals and the rating is computed server-side.
    """,
    responses=_BAD_REQUEST,
)
def create_ship(
    payload: ShipWriteDTO,
    use_case: CreateShip = Depends(get_create_ship_use_case),
) -> ShipResponseDTO:
    ship = use_case.execute(ShipMapper.to_draft(payload))
    return ShipMapper.to_response(ship)


@router.post(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Update ship",
    description="Partial update: only the fields present in the body are changed.",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def update_ship(
    ship_id: int,
    payload: ShipWriteDTO,
    use_case: UpdateShip = Depends(get_update_ship_use_case),
) -> ShipResponseDTO:
    ship = use_case.execute(ship_id, ShipMapper.to_draft(payload))
    return ShipMapper.to_response(ship)


@router.delete(
    "/ships/{ship_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete ship",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def delete_ship(
    ship_id: int,
    use_case: DeleteShip = Depends(get_delete_ship_use_case),
) -> Response:
    use_case.execute(ship_id)
    return Response(status_code=status.HTTP_200_OK)
