from .actions import ModelAction
from .route_point import FullRouteInfo, RoutePoint, RoutePointType, to_utc_naive

__all__ = [
    "FullRouteInfo",
    "ModelAction",
    "RoutePoint",
    "RoutePointType",
    "to_utc_naive",
]
