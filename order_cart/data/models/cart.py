#order_cart/data/models/cart.py
from sqlalchemy import JSON, Column, DateTime, Integer, String

from order_cart.data.database import Base


class CartModel(Base):
    __tablename__ = "carts"

    owner = Column(String, primary_key=True)

    #[{product_id, quantity, unit_price, name}], whole list rewritten on every update
    items = Column(JSON, nullable=False, default=list)
    #exact decimal text, unit prices may carry more than two places
    total = Column(String(64), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
    version = Column(Integer, nullable=False, default=1)
