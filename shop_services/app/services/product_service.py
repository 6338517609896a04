"""
Service layer for the product catalogue.

The catalogue is a fixed list; there are no write operations.  Every
call hands out fresh dictionaries so callers cannot alter the
catalogue by mutating a response.
"""

from typing import Any, Dict, List, Tuple

PRODUCTS: Tuple[Tuple[int, str], ...] = (
    (1, "Laptop"),
    (2, "Phone"),
    (3, "Tablet"),
)


class ProductService:
    """Read-only access to the product catalogue."""

    @classmethod
    async def list_products(cls) -> List[Dict[str, Any]]:
        return [{"id": product_id, "name": name} for product_id, name in PRODUCTS]
