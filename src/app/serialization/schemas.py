from __future__ import annotations

from datetime import datetime

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from src.domain.models.route_point import RoutePointType, to_utc_naive


class ServerRoutePointSchema(BaseModel):
    """Wire representation of a route point.

    Accepts both the snake_case keys of the route API and the camelCase keys
    found in mock data; always serializes to snake_case.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    type: RoutePointType
    destination: str
    date_from: datetime = Field(validation_alias=AliasChoices("date_from", "dateFrom"))
    date_to: datetime = Field(validation_alias=AliasChoices("date_to", "dateTo"))
    base_price: int | float = Field(
        default=0, validation_alias=AliasChoices("base_price", "basePrice")
    )
    offers: list[str] = Field(default_factory=list)
    is_favorite: bool = Field(
        default=False, validation_alias=AliasChoices("is_favorite", "isFavorite")
    )

    @field_validator("date_from", "date_to", mode="after")
    @classmethod
    def _normalize_dates(cls, value: datetime) -> datetime:
        return to_utc_naive(value)

    @model_validator(mode="after")
    def _check_values(self) -> "ServerRoutePointSchema":
        if self.date_from > self.date_to:
            raise ValueError("date_from must not be later than date_to")
        if self.base_price < 0:
            raise ValueError("base_price must be non-negative")
        return self
