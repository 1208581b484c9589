from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Callable, Mapping, Sequence

from src.domain.models.route_point import RoutePoint, to_utc_naive

FilterFunction = Callable[[datetime, Sequence[RoutePoint]], "list[RoutePoint] | None"]


class FilterType(str, Enum):
    EVERYTHING = "everything"
    FUTURE = "future"
    PRESENT = "present"
    PAST = "past"


DEFAULT_FILTER_TYPE = FilterType.EVERYTHING


def filter_everything(date: datetime, points: Sequence[RoutePoint]) -> list[RoutePoint]:
    return list(points)


def filter_future(date: datetime, points: Sequence[RoutePoint]) -> list[RoutePoint]:
    date = to_utc_naive(date)
    return [p for p in points if p.date_from > date]


def filter_present(date: datetime, points: Sequence[RoutePoint]) -> list[RoutePoint]:
    date = to_utc_naive(date)
    return [p for p in points if p.date_from <= date <= p.date_to]


def filter_past(date: datetime, points: Sequence[RoutePoint]) -> list[RoutePoint]:
    date = to_utc_naive(date)
    return [p for p in points if p.date_to < date]


FILTER_FUNCTIONS: Mapping[str, FilterFunction] = {
    FilterType.EVERYTHING.value: filter_everything,
    FilterType.FUTURE.value: filter_future,
    FilterType.PRESENT.value: filter_present,
    FilterType.PAST.value: filter_past,
}
