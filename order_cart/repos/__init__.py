# order_cart/repos/__init__.py
from order_cart.repos.cart_store import CartStore
from order_cart.repos.memory_cart_store import MemoryCartStore
from order_cart.repos.redis_cart_store import RedisCartStore
from order_cart.repos.sql_cart_store import SqlCartStore

__all__ = ["CartStore", "MemoryCartStore", "RedisCartStore", "SqlCartStore", "build_cart_store"]


def build_cart_store(backend: str) -> CartStore:
    if backend == "sql":
        return SqlCartStore()
    if backend == "redis":
        return RedisCartStore()
    if backend == "memory":
        return MemoryCartStore()
    raise ValueError(f"Unknown cart store backend: {backend}")
