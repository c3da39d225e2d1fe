# order_cart/repos/cart_store.py
from abc import ABC, abstractmethod

from order_cart.domain.cart import Cart


class CartStore(ABC):
    """
    Durable storage of one cart document per owner.

    Writes are conditional: ``create`` only succeeds when no cart exists
    for the owner and ``update`` only when the stored version still
    equals ``expected_version``. Both raise ConcurrentModification
    otherwise and leave the stored document untouched.
    Returned carts are independent copies of the stored state.
    """

    def open(self) -> None:
        """Acquire connections; called once at service start."""

    def close(self) -> None:
        """Release connections; called once at shutdown."""

    @abstractmethod
    def get(self, owner: str) -> Cart | None:
        ...

    @abstractmethod
    def create(self, cart: Cart) -> Cart:
        """Insert a new cart with version 1."""

    @abstractmethod
    def update(self, cart: Cart, expected_version: int) -> Cart:
        """Replace the whole document, bumping version to expected_version + 1."""

    @abstractmethod
    def delete(self, owner: str) -> None:
        """Remove the owner's cart; a missing cart is not an error."""
