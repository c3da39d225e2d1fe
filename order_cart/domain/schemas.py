# order_cart/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ItemIn(_CamelModel):
    """Body for adding a product to the cart."""

    product_id: str = Field(..., min_length=1, description="Catalog product id")
    quantity: int = Field(..., gt=0, description="Quantity to add (> 0)")


class QuantityIn(_CamelModel):
    """Body for setting the quantity of an item already in the cart."""

    quantity: int = Field(..., gt=0, description="New quantity (> 0)")


class CartItemOut(_CamelModel):
    product_id: str
    quantity: int
    unit_price: Decimal
    name: str


class CartOut(_CamelModel):
    owner: str
    items: List[CartItemOut]
    total: Decimal
    updated_at: datetime | None = None
    version: int


class CartSummaryOut(_CamelModel):
    """Body returned after removing an item."""

    owner: str
    items: List[CartItemOut]
    total: Decimal


class ProductOut(_CamelModel):
    id: str
    name: str
    price: Decimal
    description: str = ""
    image_url: str | None = None


class CartLineOut(_CamelModel):
    item_id: str
    product: ProductOut
    quantity: int


class CartListOut(_CamelModel):
    items: List[CartLineOut]


class MessageOut(BaseModel):
    detail: str
