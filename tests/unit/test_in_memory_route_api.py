from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from src.adapters.persistence.in_memory_route_api import InMemoryRouteApi
from src.app.services.route_model import RouteModel
from src.domain.exceptions import DeleteError, RouteApiError
from src.domain.models import ModelAction

MOCK_POINTS = [
    {
        "id": "m1",
        "type": "bus",
        "destination": "amsterdam",
        "dateFrom": "2024-05-02T09:00:00",
        "dateTo": "2024-05-02T10:00:00",
        "basePrice": 20,
        "offers": ["wifi"],
        "isFavorite": True,
    },
    {
        "type": "ship",
        "destination": "geneva",
        "dateFrom": "2024-05-01T09:00:00",
        "dateTo": "2024-05-01T18:00:00",
        "basePrice": 300,
        "offers": [],
        "isFavorite": False,
    },
]


def _seed(tmp_path: Path) -> Path:
    path = tmp_path / "points.json"
    path.write_text(json.dumps(MOCK_POINTS), encoding="utf-8")
    return path


def test_seed_file_is_loaded_and_missing_ids_are_assigned(tmp_path: Path) -> None:
    api = InMemoryRouteApi(seed_path=_seed(tmp_path))
    records = asyncio.run(api.get_route())

    assert len(records) == 2
    assert records[0]["id"] == "m1"
    assert records[1]["id"]


def test_seed_path_from_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("ROUTE_MOCK_DATA_PATH", str(_seed(tmp_path)))
    records = asyncio.run(InMemoryRouteApi().get_route())
    assert len(records) == 2


def test_missing_seed_file_raises(tmp_path: Path) -> None:
    api = InMemoryRouteApi(seed_path=tmp_path / "nope.json")
    with pytest.raises(RouteApiError):
        asyncio.run(api.get_route())


def test_returned_records_are_copies() -> None:
    api = InMemoryRouteApi(records={"x": {"id": "x", "offers": ["a"]}})
    out = asyncio.run(api.get_route())
    out[0]["offers"].append("b")
    assert api.records["x"]["offers"] == ["a"]


def test_create_assigns_id_and_update_delete_require_existing() -> None:
    api = InMemoryRouteApi()

    async def scenario() -> None:
        created = await api.create_route_point({"destination": "x"})
        assert created["id"] in api.records

        updated = await api.update_route_point({**created, "destination": "y"})
        assert api.records[created["id"]]["destination"] == "y"
        assert updated["destination"] == "y"

        await api.delete_route_point(created)
        assert api.records == {}

        with pytest.raises(RouteApiError):
            await api.delete_route_point(created)
        with pytest.raises(RouteApiError):
            await api.update_route_point({"destination": "no id"})

    asyncio.run(scenario())


def test_route_model_over_mock_data(tmp_path: Path) -> None:
    model = RouteModel(api=InMemoryRouteApi(seed_path=_seed(tmp_path)))

    async def scenario() -> None:
        await model.init()
        point = model.get_route_point_by_id("m1")
        await model.delete_route_point(ModelAction.DELETE_POINT, point)
        with pytest.raises(DeleteError):
            await model.delete_route_point(ModelAction.DELETE_POINT, point)

    asyncio.run(scenario())

    info = model.get_full_route_info()
    assert len(model.data) == 1
    assert info is not None
    assert info.destination_ids == ("geneva",)
    assert info.total_base_price == 300
