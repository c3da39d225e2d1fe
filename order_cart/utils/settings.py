# order_cart/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

CART_STORE_BACKEND = os.getenv("CART_STORE_BACKEND", "sql")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./carts.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "http://product-service:8000")
PRODUCT_LOOKUP_TIMEOUT = float(os.getenv("PRODUCT_LOOKUP_TIMEOUT", 2.0))
CART_WRITE_ATTEMPTS = int(os.getenv("CART_WRITE_ATTEMPTS", 3))
JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_OWNER_CLAIM = os.getenv("JWT_OWNER_CLAIM", "usuarioId")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
