"""
Service layer for the shopping cart.

The cart is a single shared list of items.  Items are stored exactly
as the client submitted them, including the client-chosen ``id``;
duplicates are accepted.  Removal drops every item whose id matches,
whatever its JSON type (``1`` and ``"1"`` are the same id).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from shop_services.app.core.store import RecordStore
from shop_services.app.schemas.cart import CartItemCreate

logger = logging.getLogger(__name__)


class CartService:
    """Operations on one cart store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def list_items(self) -> List[Dict[str, Any]]:
        """Return the cart in insertion order."""
        return self.store.all()

    async def add_item(self, item: CartItemCreate) -> List[Dict[str, Any]]:
        """Append ``item`` verbatim and return the updated cart."""
        self.store.append(item.model_dump())
        logger.info("Added item %r to cart (%d item(s))", item.id, len(self.store))
        return self.store.all()

    async def remove_item(self, item_id: Any) -> List[Dict[str, Any]]:
        """Remove all items matching ``item_id`` and return the updated cart.

        Removing an id that is not in the cart is a no-op.
        """
        removed = self.store.remove(item_id)
        logger.info("Removed %d item(s) with id %r from cart", removed, item_id)
        return self.store.all()
