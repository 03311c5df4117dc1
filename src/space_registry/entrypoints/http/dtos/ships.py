from pydantic import BaseModel, ConfigDict, Field


class ShipResponseDTO(BaseModel):
    id: int
    name: str
    planet: str
    ship_type: str
    prod_date: int = Field(description="Production date as epoch milliseconds (UTC)")
    is_used: bool
    speed: float
    crew_size: int
    rating: float


class ShipCountResponseDTO(BaseModel):
    count: int


class ShipsSearchQueryDTO(BaseModel):
    """
    Query parameters for listing ships.

    Everything arrives as text and is parsed by the mapper: a value that
    does not parse is dropped like any other invalid filter.
    """

    name: str | None = Field(default=None, description="Substring of the ship name (case-sensitive)")
    planet: str | None = Field(default=None, description="Substring of the planet (case-sensitive)")
    ship_type: str | None = Field(
        default=None,
        description="Exact ship type",
        examples=["MILITARY"],
    )
    after: str | None = Field(
        default=None,
        description="Earliest production date, epoch milliseconds",
    )
    before: str | None = Field(
        default=None,
        description="Latest production date, epoch milliseconds",
        examples=["32503680000000"],
    )
    is_used: str | None = Field(default=None, description="true or false", examples=["false"])
    min_speed: str | None = Field(default=None, description="Minimum speed (inclusive)")
    max_speed: str | None = Field(default=None, description="Maximum speed (inclusive)")
    min_crew_size: str | None = Field(default=None, description="Minimum crew size (inclusive)")
    max_crew_size: str | None = Field(default=None, description="Maximum crew size (inclusive)")
    min_rating: str | None = Field(default=None, description="Minimum rating (inclusive)")
    max_rating: str | None = Field(default=None, description="Maximum rating (inclusive)")
    order: str | None = Field(
        default=None,
        description="Ascending sort key: ID, SPEED, DATE or RATING",
        examples=["SPEED"],
    )
    page_number: str | None = Field(default=None, description="Zero-based page index", examples=["0"])
    page_size: str | None = Field(default=None, description="Ships per page", examples=["3"])


class ShipWriteDTO(BaseModel):
    """
    Body for creating or updating a ship.

    All fields are optional here. Create rejects missing fields, update
    leaves them unchanged. The rating is always derived server-side.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: str | None = None
    prod_date: int | None = Field(default=None, description="Production date as epoch milliseconds")
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Daedalus",
                "planet": "Mars",
                "ship_type": "TRANSPORT",
                "prod_date": 32503680000000,
                "is_used": False,
                "speed": 0.5,
                "crew_size": 120,
            }
        }
    )
