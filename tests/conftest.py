"""
Shared test configuration.
Every test gets freshly built applications, so each starts with an empty cart and no orders.
These tests are executed by `pytest` and should remain deterministic.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from shop_services.app.core.store import RecordStore
from shop_services.app.main import create_cart_app, create_order_app, create_product_app


@pytest.fixture
def cart_store() -> RecordStore:
    return RecordStore("cart")


@pytest.fixture
def order_store() -> RecordStore:
    return RecordStore("orders")


@pytest.fixture
def cart_client(cart_store: RecordStore) -> Iterator[TestClient]:
    with TestClient(create_cart_app(store=cart_store)) as client:
        yield client


@pytest.fixture
def order_client(order_store: RecordStore) -> Iterator[TestClient]:
    with TestClient(create_order_app(store=order_store)) as client:
        yield client


@pytest.fixture
def product_client() -> Iterator[TestClient]:
    with TestClient(create_product_app()) as client:
        yield client
