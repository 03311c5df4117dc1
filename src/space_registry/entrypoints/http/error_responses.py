"""REST API error response models.

Every error response of the ship API has the same shape.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which field failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "speed",
                "message": "Must be less than 0.99",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Not found:
            {
                "detail": "Ship with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Rejected write:
            {
                "detail": "Validation failed",
                "code": "BAD_REQUEST",
                "errors": [
                    {
                        "field": "name",
                        "message": "Must be non-empty and shorter than 50 characters",
                        "code": "INVALID_VALUE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Ship with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "BAD_REQUEST",
                    "errors": [
                        {
                            "field": "id",
                            "message": "Must be a positive integer",
                            "code": "INVALID_ID",
                        }
                    ],
                },
            ]
        }
    )
