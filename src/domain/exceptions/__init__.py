from .route_model import (
    AddError,
    DeleteError,
    InitializationError,
    RouteApiError,
    RouteModelError,
    UpdateError,
)

__all__ = [
    "AddError",
    "DeleteError",
    "InitializationError",
    "RouteApiError",
    "RouteModelError",
    "UpdateError",
]
