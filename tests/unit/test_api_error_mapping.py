from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import dinereg.api.routes.restaurants as restaurants_route
import dinereg.api.routes.table_registry as table_registry_route
import dinereg.api.routes.tables as tables_route
from dinereg.api.main import app
from dinereg.application.use_cases.create_restaurant import CreateRestaurant
from dinereg.application.use_cases.create_table import CreateTable
from dinereg.application.use_cases.delete_restaurant import DeleteRestaurant
from dinereg.application.use_cases.get_restaurant import GetRestaurant
from dinereg.application.use_cases.get_table import GetTable
from dinereg.application.use_cases.list_tables import ListTablePage
from dinereg.application.use_cases.set_table_status import SetTableStatus


@pytest.fixture
def client(monkeypatch, restaurant_repository, table_repository) -> TestClient:
    monkeypatch.setattr(
        restaurants_route,
        "_create_restaurant_use_case",
        lambda: CreateRestaurant(restaurant_repository=restaurant_repository),
    )
    monkeypatch.setattr(
        restaurants_route,
        "_get_restaurant_use_case",
        lambda: GetRestaurant(restaurant_repository=restaurant_repository),
    )
    monkeypatch.setattr(
        restaurants_route,
        "_delete_restaurant_use_case",
        lambda: DeleteRestaurant(restaurant_repository=restaurant_repository),
    )
    monkeypatch.setattr(
        tables_route,
        "_create_table_use_case",
        lambda: CreateTable(table_repository=table_repository),
    )
    monkeypatch.setattr(
        tables_route,
        "_get_table_use_case",
        lambda: GetTable(table_repository=table_repository),
    )
    monkeypatch.setattr(
        tables_route,
        "_set_table_status_use_case",
        lambda: SetTableStatus(table_repository=table_repository),
    )
    monkeypatch.setattr(
        table_registry_route,
        "_list_table_page_use_case",
        lambda: ListTablePage(table_repository=table_repository),
    )
    return TestClient(app)


def test_create_restaurant_serializes_defaults(client: TestClient) -> None:
    response = client.post("/v1/restaurants", json={"name": "Cafe X", "slug": "cafe-x"})

    assert response.status_code == 201
    body = response.json()
    assert body["restaurantId"] == 1
    assert body["serviceChargePct"] == "0.00"
    assert body["isActive"] is True
    assert body["languages"] is None


def test_validation_error_shape(client: TestClient) -> None:
    response = client.post(
        "/v1/restaurants",
        json={"name": "Cafe X", "slug": "cafe-x", "serviceChargePct": "12.345"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_FAILED"
    assert body["error"]["details"] == {"field": "service_charge_pct", "rule": "precision"}
    assert body["requestId"]


def test_slug_conflict_maps_to_409(client: TestClient) -> None:
    assert client.post("/v1/restaurants", json={"name": "A", "slug": "dup"}).status_code == 201

    response = client.post("/v1/restaurants", json={"name": "B", "slug": "dup"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SLUG_CONFLICT"


def test_table_flow_and_error_codes(client: TestClient) -> None:
    client.post("/v1/restaurants", json={"name": "Cafe X", "slug": "cafe-x"})

    created = client.post("/v1/restaurants/1/tables", json={"tableCode": "F0T1"})
    assert created.status_code == 201
    assert created.json()["status"] == "vacant"

    duplicate = client.post("/v1/restaurants/1/tables", json={"tableCode": "F0T1"})
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "TABLE_CODE_CONFLICT"

    occupied = client.put("/v1/tables/1/status", json={"status": "OCCUPIED"})
    assert occupied.status_code == 200
    assert occupied.json()["status"] == "occupied"

    bad_status = client.put("/v1/tables/1/status", json={"status": "reserved"})
    assert bad_status.status_code == 400
    assert bad_status.json()["error"]["details"] == {"field": "status", "rule": "one_of"}

    listed = client.get("/v1/restaurants/1/tables?status=occupied")
    assert [row["tableCode"] for row in listed.json()["tables"]] == ["F0T1"]

    assert client.delete("/v1/restaurants/1").status_code == 204

    missing_table = client.get("/v1/tables/1")
    assert missing_table.status_code == 404
    assert missing_table.json()["error"]["code"] == "TABLE_NOT_FOUND"

    missing_restaurant = client.get("/v1/restaurants/1/tables")
    assert missing_restaurant.status_code == 404
    assert missing_restaurant.json()["error"]["code"] == "RESTAURANT_NOT_FOUND"


def test_unknown_restaurant_on_table_create(client: TestClient) -> None:
    response = client.post("/v1/restaurants/9/tables", json={"tableCode": "F0T1"})

    assert response.status_code == 404
    assert response.json()["error"]["details"] == {"restaurantId": 9}


def test_malformed_body_is_invalid_request(client: TestClient) -> None:
    response = client.post("/v1/restaurants/1/tables", json={"maxSeats": "many"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REQUEST"


def test_limit_out_of_range(client: TestClient) -> None:
    client.post("/v1/restaurants", json={"name": "Cafe X", "slug": "cafe-x"})

    response = client.get("/v1/restaurants/1/tables?limit=500")

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "limit", "rule": "range"}
