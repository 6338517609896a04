"""
Tests for the order service endpoints.
They check id assignment, defaults, the not-found contract and body validation.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from shop_services.app.core.store import RecordStore


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_create_order_returns_201_with_created_order(order_client: TestClient) -> None:
    before = datetime.now(timezone.utc)

    response = order_client.post("/orders", json={"items": [{"productId": 1, "qty": 2}], "total": 1999.5})

    assert response.status_code == 201
    payload = response.json()
    assert payload["message"] == "Order created successfully"
    order = payload["order"]
    assert order["id"] == 1
    assert order["items"] == [{"productId": 1, "qty": 2}]
    assert order["total"] == 1999.5
    assert order["status"] == "CREATED"
    assert _parse_timestamp(order["createdAt"]) >= before


def test_order_ids_follow_prior_count(order_client: TestClient) -> None:
    ids = [order_client.post("/orders", json={"total": n}).json()["order"]["id"] for n in range(4)]

    assert ids == [1, 2, 3, 4]


def test_missing_fields_default_to_empty_values(order_client: TestClient) -> None:
    response = order_client.post("/orders", json={})

    order = response.json()["order"]
    assert response.status_code == 201
    assert order["items"] == []
    assert order["total"] == 0


def test_null_fields_default_to_empty_values(order_client: TestClient) -> None:
    order = order_client.post("/orders", json={"items": None, "total": None}).json()["order"]

    assert order["items"] == []
    assert order["total"] == 0


def test_create_order_without_body(order_client: TestClient) -> None:
    response = order_client.post("/orders")

    assert response.status_code == 201
    assert response.json()["order"]["items"] == []


def test_unknown_fields_are_ignored(order_client: TestClient) -> None:
    order = order_client.post("/orders", json={"total": 5, "status": "SHIPPED", "id": 99}).json()["order"]

    assert order["id"] == 1
    assert order["status"] == "CREATED"
    assert set(order) == {"id", "items", "total", "status", "createdAt"}


def test_list_orders_in_creation_order(order_client: TestClient) -> None:
    order_client.post("/orders", json={"total": 10})
    order_client.post("/orders", json={"total": 20})

    response = order_client.get("/orders")

    assert response.status_code == 200
    orders = response.json()
    assert [o["id"] for o in orders] == [1, 2]
    assert [o["total"] for o in orders] == [10, 20]
    assert all("createdAt" in o for o in orders)


def test_list_orders_empty(order_client: TestClient) -> None:
    assert order_client.get("/orders").json() == []


def test_get_order_by_id(order_client: TestClient) -> None:
    created = order_client.post("/orders", json={"items": ["a"], "total": 3}).json()["order"]
    order_client.post("/orders", json={"total": 4})

    response = order_client.get("/orders/1")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_order_returns_404(order_client: TestClient) -> None:
    order_client.post("/orders", json={})

    response = order_client.get("/orders/2")

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}


def test_get_non_numeric_order_id_returns_404(order_client: TestClient) -> None:
    order_client.post("/orders", json={})

    response = order_client.get("/orders/abc")

    assert response.status_code == 404
    assert response.json() == {"message": "Order not found"}


def test_invalid_items_are_rejected(order_client: TestClient, order_store: RecordStore) -> None:
    response = order_client.post("/orders", json={"items": "not-a-list"})

    assert response.status_code == 422
    assert response.json()["message"] == "Invalid request body"
    assert len(order_store) == 0


def test_negative_total_is_rejected(order_client: TestClient) -> None:
    response = order_client.post("/orders", json={"total": -1})

    assert response.status_code == 422
    assert response.json()["errors"][0]["loc"][-1] == "total"


def test_rejected_order_does_not_consume_an_id(order_client: TestClient) -> None:
    order_client.post("/orders", json={"total": "lots"})

    response = order_client.post("/orders", json={"total": 1})

    assert response.json()["order"]["id"] == 1


def test_order_health(order_client: TestClient) -> None:
    assert order_client.get("/health").text == "OK"


def test_get_order_accepts_numeric_spellings(order_client: TestClient) -> None:
    created = order_client.post("/orders", json={"total": 7}).json()["order"]

    for spelling in ("1", "01", "1.0"):
        response = order_client.get(f"/orders/{spelling}")
        assert response.status_code == 200, spelling
        assert response.json() == created
