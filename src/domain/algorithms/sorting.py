from __future__ import annotations

from enum import Enum
from typing import Callable, Mapping, Sequence

from src.domain.models.route_point import RoutePoint

SortFunction = Callable[[Sequence[RoutePoint]], list[RoutePoint]]


class SortType(str, Enum):
    DAY = "day"
    EVENT = "event"
    TIME = "time"
    PRICE = "price"
    OFFERS = "offers"


DEFAULT_SORT_TYPE = SortType.DAY


def sort_by_day(points: Sequence[RoutePoint]) -> list[RoutePoint]:
    return sorted(points, key=lambda p: p.date_from)


def sort_by_time(points: Sequence[RoutePoint]) -> list[RoutePoint]:
    # Longest first.
    return sorted(points, key=lambda p: p.duration, reverse=True)


def sort_by_price(points: Sequence[RoutePoint]) -> list[RoutePoint]:
    return sorted(points, key=lambda p: p.base_price, reverse=True)


# sorted() is stable (also with reverse=True), so ties keep collection order.
SORT_FUNCTIONS: Mapping[SortType, SortFunction] = {
    SortType.DAY: sort_by_day,
    SortType.TIME: sort_by_time,
    SortType.PRICE: sort_by_price,
}


def is_sortable(sort_type: SortType) -> bool:
    return sort_type in SORT_FUNCTIONS


def sort_route_points(
    points: Sequence[RoutePoint], sort_type: SortType = DEFAULT_SORT_TYPE
) -> list[RoutePoint]:
    func = SORT_FUNCTIONS.get(sort_type)
    if func is None:
        raise ValueError(f"Route points cannot be sorted by {sort_type.value!r}")
    return func(points)
