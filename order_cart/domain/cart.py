# order_cart/domain/cart.py
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Catalog record, read-only for the cart."""

    id: str
    name: str
    price: Decimal
    description: str = ""
    image_url: str | None = None


class CartItem(BaseModel):
    product_id: str
    quantity: int = Field(..., gt=0)
    #price and name snapshot taken when the item was first added
    unit_price: Decimal
    name: str

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """
    Cart aggregate, one per owner.

    Mutators change the object in place; the whole document is then
    written back by the store. ``total`` is always recomputed from all
    items, never adjusted incrementally.
    """

    owner: str
    items: List[CartItem] = Field(default_factory=list)
    total: Decimal = Decimal("0.00")
    updated_at: datetime | None = None
    version: int = 0

    def find_item(self, product_id: str) -> CartItem | None:
        return next((i for i in self.items if i.product_id == product_id), None)

    def add_product(self, product: Product, quantity: int) -> CartItem:
        existing = self.find_item(product.id)

        if existing:
            #snapshot is kept, only quantity grows
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(
                product_id=product.id,
                quantity=quantity,
                unit_price=product.price,
                name=product.name,
            )
            self.items.append(item)

        self.recompute_total()
        return item

    def set_quantity(self, product_id: str, quantity: int) -> CartItem | None:
        item = self.find_item(product_id)
        if item is None:
            return None

        item.quantity = quantity
        self.recompute_total()
        return item

    def remove_item(self, product_id: str) -> CartItem | None:
        item = self.find_item(product_id)
        if item is None:
            return None

        self.items = [i for i in self.items if i.product_id != product_id]
        self.recompute_total()
        return item

    def recompute_total(self) -> Decimal:
        self.total = sum((i.subtotal for i in self.items), Decimal("0.00"))
        return self.total


class CartLine(BaseModel):
    """Listing row: the item enriched with live catalog data."""

    item_id: str
    product: Product
    quantity: int
