#import all models so SQLAlchemy registers them in Base.metadata

from order_cart.data.models.cart import CartModel

__all__ = ["CartModel"]
