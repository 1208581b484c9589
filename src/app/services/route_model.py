from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Callable, Mapping, Sequence

from src.app.observable import Observable
from src.app.ports.output import IRouteApi
from src.app.serialization import (
    adapt_route_point_to_model,
    adapt_route_point_to_server,
)
from src.domain.algorithms.collections import update_item
from src.domain.algorithms.sorting import SortType, sort_route_points
from src.domain.exceptions import (
    AddError,
    DeleteError,
    InitializationError,
    UpdateError,
)
from src.domain.models import FullRouteInfo, ModelAction, RoutePoint

logger = logging.getLogger(__name__)

RouteCollection = tuple[RoutePoint, ...]
# name -> predicate(reference_date, points); None counts as no matches.
RouteFilter = Callable[[datetime, Sequence[RoutePoint]], "Sequence[RoutePoint] | None"]


class RouteModel(Observable[RouteCollection]):
    """Authoritative in-memory collection of route points.

    Every mutation goes through the route API first; the collection is replaced
    (never mutated in place) only after the remote call succeeds, and observers
    are notified after the replacement.

    With `serialize_point_mutations` enabled, concurrent update/delete calls
    for the same point id run one after another, so their confirmations are
    applied in call order.
    """

    def __init__(self, *, api: IRouteApi, serialize_point_mutations: bool = True) -> None:
        super().__init__(default_data=())
        self._api = api
        self._serialize_point_mutations = serialize_point_mutations
        self._point_locks: dict[str, asyncio.Lock] = {}
        self._point_lock_users: dict[str, int] = {}
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def init(self) -> None:
        try:
            server_data = await self._api.get_route()
            data = tuple(adapt_route_point_to_model(item) for item in server_data)
            _ensure_unique_ids(data)
        except Exception as exc:
            logger.warning("Route init failed: %s", exc)
            raise InitializationError.from_cause(exc) from exc

        self.data = data
        self._initialized = True
        logger.debug("Route initialized with %d points", len(data))
        self.notify(ModelAction.INIT)

    def get_route_point_by_id(self, point_id: str) -> RoutePoint | None:
        return next((p for p in self.data if p.id == point_id), None)

    async def add_new_route_point(self, action: Any, route_point: RoutePoint) -> RoutePoint:
        try:
            created = await self._api.create_route_point(
                adapt_route_point_to_server(route_point)
            )
            adapted = adapt_route_point_to_model(created)
            if adapted.id is None:
                raise ValueError("Route API returned a point without id")
            if self.get_route_point_by_id(adapted.id) is not None:
                raise ValueError(f"Route point {adapted.id!r} already exists")
        except Exception as exc:
            logger.warning("Adding route point failed: %s", exc)
            raise AddError.from_cause(exc) from exc

        self.data = (*self.data, adapted)
        logger.debug("Added route point %s", adapted.id)
        self.notify(action, adapted)
        return adapted

    async def update_route_point(self, action: Any, route_point: RoutePoint) -> RoutePoint:
        async with self._point_guard(route_point.id):
            try:
                updated = await self._api.update_route_point(
                    adapt_route_point_to_server(route_point)
                )
                adapted = adapt_route_point_to_model(updated)
            except Exception as exc:
                logger.warning("Updating route point %s failed: %s", route_point.id, exc)
                raise UpdateError.from_cause(exc) from exc

            self.data = update_item(
                self.data, adapted, lambda current: current.id == route_point.id
            )
            logger.debug("Updated route point %s", route_point.id)
            self.notify(action, adapted)
            return adapted

    async def delete_route_point(self, action: Any, route_point: RoutePoint) -> None:
        async with self._point_guard(route_point.id):
            try:
                await self._api.delete_route_point(
                    adapt_route_point_to_server(route_point)
                )
            except Exception as exc:
                logger.warning("Deleting route point %s failed: %s", route_point.id, exc)
                raise DeleteError.from_cause(exc) from exc

            self.data = tuple(p for p in self.data if p.id != route_point.id)
            logger.debug("Deleted route point %s", route_point.id)
            self.notify(action, route_point)

    def get_full_route_info(self) -> FullRouteInfo | None:
        sorted_data = sort_route_points(self.data, SortType.DAY)
        if not sorted_data:
            return None

        total_base_price = 0
        destination_ids: list[str] = []
        offers: list[str] = []
        for point in sorted_data:
            total_base_price += point.base_price
            if point.destination not in destination_ids:
                destination_ids.append(point.destination)
            offers.extend(point.offers)

        return FullRouteInfo(
            route_date_from=sorted_data[0].date_from,
            route_date_to=sorted_data[-1].date_to,
            total_base_price=total_base_price,
            destination_ids=tuple(destination_ids),
            offers=tuple(offers),
        )

    def get_routes_count_by_filters(
        self, filters: Mapping[str, RouteFilter], date: datetime
    ) -> dict[str, int]:
        data = self.data
        return {name: len(func(date, data) or ()) for name, func in filters.items()}

    @asynccontextmanager
    async def _point_guard(self, point_id: str | None) -> AsyncIterator[None]:
        if not self._serialize_point_mutations or point_id is None:
            yield
            return

        lock = self._point_locks.setdefault(point_id, asyncio.Lock())
        self._point_lock_users[point_id] = self._point_lock_users.get(point_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            # Drop the lock once nobody holds or waits for it.
            remaining = self._point_lock_users[point_id] - 1
            if remaining:
                self._point_lock_users[point_id] = remaining
            else:
                del self._point_lock_users[point_id]
                del self._point_locks[point_id]


def _ensure_unique_ids(points: RouteCollection) -> None:
    seen: set[str] = set()
    for point in points:
        if point.id is None:
            raise ValueError("Route API returned a point without id")
        if point.id in seen:
            raise ValueError(f"Duplicate route point id {point.id!r}")
        seen.add(point.id)
