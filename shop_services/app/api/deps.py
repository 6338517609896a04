"""
FastAPI dependencies shared by the endpoint modules.

The application factory attaches a ``RecordStore`` to ``app.state.store``;
the dependencies below fetch it from the current request and wrap it in
the matching service.  Override ``get_store`` through
``app.dependency_overrides`` to run handlers against another store.
"""

from fastapi import Depends, Request

from shop_services.app.core.store import RecordStore
from shop_services.app.services.cart_service import CartService
from shop_services.app.services.order_service import OrderService


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_cart_service(store: RecordStore = Depends(get_store)) -> CartService:
    return CartService(store)


def get_order_service(store: RecordStore = Depends(get_store)) -> OrderService:
    return OrderService(store)
