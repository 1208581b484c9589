from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class RouteModelRuntimeConfig:
    mock_data_path: str | None
    serialize_point_mutations: bool
    log_level: str

    @staticmethod
    def from_env() -> "RouteModelRuntimeConfig":
        mock_data_path = os.getenv("ROUTE_MOCK_DATA_PATH")
        if mock_data_path is not None:
            mock_data_path = mock_data_path.strip() or None

        return RouteModelRuntimeConfig(
            mock_data_path=mock_data_path,
            serialize_point_mutations=_env_bool(
                "ROUTE_MODEL_SERIALIZE_MUTATIONS", True
            ),
            log_level=(os.getenv("ROUTE_MODEL_LOG_LEVEL") or "WARNING").strip().upper(),
        )


def configure_logging(cfg: RouteModelRuntimeConfig) -> None:
    """Apply the configured level to the package loggers."""

    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.getLogger("src").setLevel(level)
