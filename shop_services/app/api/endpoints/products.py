"""
Product catalogue endpoints.

``GET /`` answers with a plain-text banner and ``GET /products`` with
the fixed catalogue.
"""

from typing import List

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from shop_services.app.schemas.product import ProductRead
from shop_services.app.services.product_service import ProductService

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Products here"


@router.get("/products", response_model=List[ProductRead])
async def list_products() -> List[ProductRead]:
    """Return the catalogue.  The list never changes."""
    return await ProductService.list_products()
