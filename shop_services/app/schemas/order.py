"""
Pydantic models for orders.

``OrderCreate`` describes the request body accepted by ``POST /orders``;
both fields are optional and fall back to an empty item list and a zero
total.  ``OrderRead`` is the stored order as returned to clients.  The
creation timestamp is exposed as ``createdAt`` on the wire.
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    CREATED = "CREATED"


class OrderCreate(BaseModel):
    """Schema for creating an order."""

    items: Optional[List[Any]] = Field(None, examples=[[{"productId": 1, "quantity": 2}]])
    total: Optional[float] = Field(None, ge=0, examples=[1999.99])


class OrderRead(BaseModel):
    """Schema for reading an order."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    items: List[Any]
    total: float
    status: OrderStatus
    created_at: datetime = Field(..., alias="createdAt")


class OrderCreated(BaseModel):
    """Response body of ``POST /orders``."""

    message: str = Field(..., examples=["Order created successfully"])
    order: OrderRead
