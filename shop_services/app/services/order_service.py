"""
Service layer for orders.

Orders get a server-assigned integer id equal to the number of orders
already stored plus one, a fixed ``CREATED`` status and a UTC creation
timestamp.  Ids are never reused because orders cannot be deleted.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from shop_services.app.core.errors import RecordNotFoundError
from shop_services.app.core.store import RecordStore
from shop_services.app.schemas.order import OrderCreate, OrderStatus

logger = logging.getLogger(__name__)


class OrderService:
    """Operations on one order store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def create_order(self, data: OrderCreate) -> Dict[str, Any]:
        """Build a new order from ``data``, store it and return it.

        Missing ``items`` default to an empty list and a missing
        ``total`` to zero.
        """
        order = {
            "id": len(self.store) + 1,
            "items": data.items or [],
            "total": data.total or 0,
            "status": OrderStatus.CREATED.value,
            "createdAt": datetime.now(timezone.utc),
        }
        self.store.append(order)
        logger.info("Created order %s (total=%s, %d item(s))", order["id"], order["total"], len(order["items"]))
        return order

    async def list_orders(self) -> List[Dict[str, Any]]:
        return self.store.all()

    async def get_order(self, order_id: Any) -> Dict[str, Any]:
        """Retrieve a single order.

        Raises ``RecordNotFoundError`` if no order has the given id.
        """
        order = self.store.find(order_id)
        if order is None:
            raise RecordNotFoundError("Order not found")
        return order
