# order_cart/repos/memory_cart_store.py
import threading

from order_cart.domain.cart import Cart
from order_cart.domain.errors import ConcurrentModification
from order_cart.repos.cart_store import CartStore
from order_cart.utils.logging import get_logger

logger = get_logger(__name__)


class MemoryCartStore(CartStore):
    """In-process store for development and tests. Holds serialized documents."""

    def __init__(self):
        self._docs: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, owner: str) -> Cart | None:
        with self._lock:
            doc = self._docs.get(owner)
        return Cart.model_validate_json(doc) if doc else None

    def create(self, cart: Cart) -> Cart:
        stored = cart.model_copy(update={"version": 1}, deep=True)
        with self._lock:
            if cart.owner in self._docs:
                raise ConcurrentModification(cart.owner, expected_version=0)
            self._docs[cart.owner] = stored.model_dump_json()

        logger.info(f"Created cart for owner {cart.owner} in memory")
        return stored

    def update(self, cart: Cart, expected_version: int) -> Cart:
        stored = cart.model_copy(update={"version": expected_version + 1}, deep=True)
        with self._lock:
            doc = self._docs.get(cart.owner)
            if doc is None or Cart.model_validate_json(doc).version != expected_version:
                raise ConcurrentModification(cart.owner, expected_version)
            self._docs[cart.owner] = stored.model_dump_json()

        logger.info(f"Updated cart for owner {cart.owner} in memory, version {stored.version}")
        return stored

    def delete(self, owner: str) -> None:
        with self._lock:
            self._docs.pop(owner, None)
        logger.info(f"Deleted cart for owner {owner} in memory")
