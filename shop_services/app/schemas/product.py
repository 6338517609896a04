"""Pydantic models for catalogue products."""

from pydantic import BaseModel, Field


class ProductRead(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Laptop"])
