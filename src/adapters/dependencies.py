from __future__ import annotations

from src.adapters.config import RouteModelRuntimeConfig, configure_logging
from src.adapters.persistence.in_memory_route_api import InMemoryRouteApi
from src.app.ports.output import IRouteApi
from src.app.services.route_model import RouteModel


def get_route_model(
    api: IRouteApi | None = None, cfg: RouteModelRuntimeConfig | None = None
) -> RouteModel:
    """Build an uninitialized RouteModel; callers must await `init()`."""

    cfg = cfg or RouteModelRuntimeConfig.from_env()
    configure_logging(cfg)

    if api is None:
        api = InMemoryRouteApi(seed_path=cfg.mock_data_path)

    return RouteModel(
        api=api, serialize_point_mutations=cfg.serialize_point_mutations
    )
