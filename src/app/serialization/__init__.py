from .route_point_adapter import adapt_route_point_to_model, adapt_route_point_to_server
from .schemas import ServerRoutePointSchema

__all__ = [
    "ServerRoutePointSchema",
    "adapt_route_point_to_model",
    "adapt_route_point_to_server",
]
