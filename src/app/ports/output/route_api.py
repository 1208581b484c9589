from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence


class IRouteApi(ABC):
    """Port for the remote service persisting route points.

    Records are server-shaped mappings. Implementations raise on failure.
    """

    @abstractmethod
    async def get_route(self) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def create_route_point(self, point: Mapping[str, Any]) -> Mapping[str, Any]:
        """Persist a new point and return it with the server-assigned id."""

    @abstractmethod
    async def update_route_point(self, point: Mapping[str, Any]) -> Mapping[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def delete_route_point(self, point: Mapping[str, Any]) -> None:
        raise NotImplementedError
