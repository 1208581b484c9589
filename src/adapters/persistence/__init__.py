from .in_memory_route_api import InMemoryRouteApi

__all__ = [
    "InMemoryRouteApi",
]
