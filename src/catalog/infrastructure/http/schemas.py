"""Pydantic models for the products HTTP API.

Request bodies are deliberately loose: a missing or blank name and a
missing price reach the domain, which rejects them with a 400.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from catalog.application.dto import ProductDTO


class CreateProductRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name, not blank")
    price: Optional[Decimal] = Field(
        default=None, description="Price; rounded half-up to 2 decimal places"
    )


class UpdateProductRequest(BaseModel):
    """Partial update. Omitted (or null) fields are left unchanged."""

    name: Optional[str] = None
    price: Optional[Decimal] = None


class ProductResponse(BaseModel):
    id: str
    name: str
    price: Decimal
    status: str = Field(..., examples=["ACTIVE", "INACTIVE"])

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductResponse:
        return cls(id=dto.id, name=dto.name, price=dto.price, status=dto.status)


class ErrorResponse(BaseModel):
    status: int
    message: str
    timestamp: datetime = Field(default_factory=datetime.now)
