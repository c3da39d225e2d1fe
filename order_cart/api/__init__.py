# order_cart/api/__init__.py
