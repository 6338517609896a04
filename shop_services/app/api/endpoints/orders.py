"""
Order endpoints.

Orders are created with a server-assigned id and can be listed or
fetched one at a time.  There is no update or delete.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from shop_services.app.api.deps import get_order_service
from shop_services.app.schemas.order import OrderCreate, OrderCreated, OrderRead
from shop_services.app.services.order_service import OrderService

router = APIRouter()


@router.post("", response_model=OrderCreated, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_in: Optional[OrderCreate] = None,
    service: OrderService = Depends(get_order_service),
) -> OrderCreated:
    """Create a new order with status ``CREATED``.

    The body is optional; without one the order has no items and a
    zero total.
    """
    order = await service.create_order(order_in or OrderCreate())
    return OrderCreated(message="Order created successfully", order=OrderRead.model_validate(order))


@router.get("", response_model=List[OrderRead])
async def list_orders(service: OrderService = Depends(get_order_service)) -> List[OrderRead]:
    return await service.list_orders()


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderRead:
    """Retrieve a single order by its ID.

    ``order_id`` is taken as a string so that any path segment is
    accepted; a non-numeric id simply matches nothing and yields 404
    ``{"message": "Order not found"}``.
    """
    return await service.get_order(order_id)
