"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (cart, orders, products, health).  The routers are combined
per service in ``api/router.py``.
"""
