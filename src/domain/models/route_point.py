from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum


def to_utc_naive(value: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are taken as UTC already."""

    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class RoutePointType(str, Enum):
    TAXI = "taxi"
    BUS = "bus"
    TRAIN = "train"
    SHIP = "ship"
    DRIVE = "drive"
    FLIGHT = "flight"
    CHECK_IN = "check-in"
    SIGHTSEEING = "sightseeing"
    RESTAURANT = "restaurant"


@dataclass(frozen=True, slots=True)
class RoutePoint:
    """One itinerary leg of a trip.

    `destination` and `offers` are identifiers owned by external models.
    `id` is assigned by the remote service and is None until the point is created.
    """

    type: RoutePointType
    destination: str
    date_from: datetime
    date_to: datetime
    base_price: int | float = 0
    offers: tuple[str, ...] = ()
    is_favorite: bool = False
    id: str | None = None

    def __post_init__(self) -> None:
        # Stored as UTC-naive so points from any source stay comparable.
        object.__setattr__(self, "date_from", to_utc_naive(self.date_from))
        object.__setattr__(self, "date_to", to_utc_naive(self.date_to))
        if self.date_from > self.date_to:
            raise ValueError("date_from must not be later than date_to")
        if self.base_price < 0:
            raise ValueError("base_price must be non-negative")

    @property
    def duration(self) -> timedelta:
        return self.date_to - self.date_from


@dataclass(frozen=True, slots=True)
class FullRouteInfo:
    """Trip-wide aggregate computed from the chronologically sorted collection."""

    route_date_from: datetime
    route_date_to: datetime
    total_base_price: int | float
    destination_ids: tuple[str, ...] = ()
    offers: tuple[str, ...] = ()
