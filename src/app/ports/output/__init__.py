from .route_api import IRouteApi

__all__ = [
    "IRouteApi",
]
