from __future__ import annotations

from typing import Any, Mapping

from src.app.serialization.schemas import ServerRoutePointSchema
from src.domain.models.route_point import RoutePoint


def adapt_route_point_to_model(data: Mapping[str, Any]) -> RoutePoint:
    """Server-shaped record -> RoutePoint. Raises pydantic.ValidationError."""

    schema = ServerRoutePointSchema.model_validate(dict(data))
    return RoutePoint(
        id=schema.id,
        type=schema.type,
        destination=schema.destination,
        date_from=schema.date_from,
        date_to=schema.date_to,
        base_price=schema.base_price,
        offers=tuple(schema.offers),
        is_favorite=schema.is_favorite,
    )


def adapt_route_point_to_server(point: RoutePoint) -> dict[str, Any]:
    schema = ServerRoutePointSchema.model_validate(
        {
            "id": point.id,
            "type": point.type,
            "destination": point.destination,
            "date_from": point.date_from,
            "date_to": point.date_to,
            "base_price": point.base_price,
            "offers": list(point.offers),
            "is_favorite": point.is_favorite,
        }
    )
    # A point that was never created has no id on the wire.
    exclude = {"id"} if point.id is None else None
    return schema.model_dump(mode="json", exclude=exclude)
