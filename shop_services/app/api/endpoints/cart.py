"""
Cart endpoints.

The cart is a single shared list.  Items are added with the id chosen
by the client and removed by that id; both mutating endpoints respond
with the whole cart after the change.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from shop_services.app.api.deps import get_cart_service
from shop_services.app.schemas.cart import CartItemCreate, CartResponse
from shop_services.app.services.cart_service import CartService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_cart(service: CartService = Depends(get_cart_service)) -> List[Dict[str, Any]]:
    """Return the current cart in insertion order."""
    return await service.list_items()


@router.post("", response_model=CartResponse)
async def add_to_cart(
    item: CartItemCreate,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """Add an item to the cart.

    The body must be a JSON object with an ``id``; any other fields are
    stored as submitted.  Responds with 200 rather than 201 because the
    body is the cart, not the created item.
    """
    cart = await service.add_item(item)
    return CartResponse(message="Item added to cart", cart=cart)


@router.delete("/{item_id}", response_model=CartResponse)
async def remove_from_cart(
    item_id: str,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """Remove every item whose id matches ``item_id``.

    Succeeds even when nothing matched.
    """
    cart = await service.remove_item(item_id)
    return CartResponse(message="Item removed", cart=cart)
