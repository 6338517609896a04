"""
Top-level routers, one per service.

Each service is deployed as its own process, so instead of a single
router aggregating every domain this module builds one router per
service.  Every service router includes the health endpoint.
"""

from fastapi import APIRouter

from .endpoints import cart, health, orders, products


def _service_router() -> APIRouter:
    router = APIRouter()
    router.include_router(health.router, tags=["health"])
    return router


cart_router = _service_router()
cart_router.include_router(cart.router, prefix="/cart", tags=["cart"])

order_router = _service_router()
order_router.include_router(orders.router, prefix="/orders", tags=["orders"])

# The products router defines "/" and "/products" itself, so no prefix.
product_router = _service_router()
product_router.include_router(products.router, tags=["products"])
