"""
Pydantic models for cart items.

A cart item is whatever the client sends, as long as it is a JSON
object carrying an ``id`` that is a string, number or boolean.  The id
is chosen by the client and is not checked for uniqueness; all other
fields are kept verbatim.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class CartItemCreate(BaseModel):
    """Schema for adding an item to the cart.

    Unknown fields are allowed and stored as submitted.
    """

    model_config = ConfigDict(extra="allow")

    # Strict types keep the id exactly as sent: no bool-to-int or
    # float-to-int coercion.
    id: Union[StrictBool, StrictInt, StrictFloat, StrictStr] = Field(
        ..., examples=[1], description="Client-supplied item identifier"
    )


class CartResponse(BaseModel):
    """Response returned after the cart has been modified."""

    message: str = Field(..., examples=["Item added to cart"])
    cart: List[Dict[str, Any]]
