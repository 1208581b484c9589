from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence
from uuid import uuid4

from src.app.ports.output import IRouteApi
from src.domain.exceptions import RouteApiError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InMemoryRouteApi(IRouteApi):
    """Mock-backed route API keeping server-shaped records in process.

    Env vars:
      - ROUTE_MOCK_DATA_PATH: optional JSON file with a list of route point records

    Records are returned as deep copies, so callers never share state with it.
    """

    seed_path: str | Path | None = None
    records: dict[str, dict[str, Any]] = field(default_factory=dict)
    _loaded: bool = field(default=False, init=False, repr=False)

    def _seed(self) -> Path | None:
        value = self.seed_path or os.getenv("ROUTE_MOCK_DATA_PATH")
        return Path(value) if value else None

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        self._loaded = True

        path = self._seed()
        if path is None:
            return
        if not path.exists():
            raise RouteApiError(f"Mock route data not found: {path}")

        with path.open("r", encoding="utf-8") as fp:
            raw = json.load(fp)
        if not isinstance(raw, list):
            raise RouteApiError("Mock route data must be a JSON list")

        for item in raw:
            record = dict(item)
            point_id = str(record.get("id") or uuid4())
            record["id"] = point_id
            self.records.setdefault(point_id, record)

        logger.info("Loaded %d mock route points from %s", len(raw), path)

    async def get_route(self) -> Sequence[Mapping[str, Any]]:
        self._ensure_loaded()
        return [copy.deepcopy(r) for r in self.records.values()]

    async def create_route_point(self, point: Mapping[str, Any]) -> Mapping[str, Any]:
        self._ensure_loaded()
        record = copy.deepcopy(dict(point))
        record["id"] = str(uuid4())
        self.records[record["id"]] = record
        return copy.deepcopy(record)

    async def update_route_point(self, point: Mapping[str, Any]) -> Mapping[str, Any]:
        self._ensure_loaded()
        point_id = self._existing_id(point)
        record = copy.deepcopy(dict(point))
        self.records[point_id] = record
        return copy.deepcopy(record)

    async def delete_route_point(self, point: Mapping[str, Any]) -> None:
        self._ensure_loaded()
        del self.records[self._existing_id(point)]

    def _existing_id(self, point: Mapping[str, Any]) -> str:
        point_id = point.get("id")
        if point_id is None or str(point_id) not in self.records:
            raise RouteApiError(f"Route point {point_id!r} not found")
        return str(point_id)
