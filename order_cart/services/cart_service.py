# order_cart/services/cart_service.py
from datetime import datetime, timezone
from typing import Callable, List

from order_cart.domain.cart import Cart, CartLine, Product
from order_cart.domain.errors import (
    CartNotFound,
    ItemNotFound,
    ProductNotFound,
    Unauthenticated,
    ValidationError,
)
from order_cart.repos.cart_store import CartStore
from order_cart.services.product_client import ProductLookup
from order_cart.utils.logging import get_logger
from order_cart.utils.retry import conflict_retry
from order_cart.utils.settings import CART_WRITE_ATTEMPTS

logger = get_logger(__name__)


def _require_owner(owner: str | None) -> None:
    if not owner:
        raise Unauthenticated("User not authenticated")


def _require_product_id(product_id: str | None) -> None:
    if not isinstance(product_id, str) or not product_id.strip():
        raise ValidationError("productId is required", field="productId")


def _validate_quantity(quantity) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("quantity must be an integer", field="quantity")
    if quantity <= 0:
        raise ValidationError("quantity must be greater than 0", field="quantity")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CartService:
    """
    Use cases for the cart domain.

    commands (add_item, remove_item, update_quantity, clear) run as a
    read-modify-write cycle against the store; the write is conditional on
    the version that was read, and on ConcurrentModification the whole cycle
    is repeated (up to ``write_attempts`` times) before the error surfaces.
    query (list_items) only reads.
    """

    def __init__(
        self,
        store: CartStore,
        product_lookup: ProductLookup,
        write_attempts: int | None = None,
    ):
        self.store = store
        self.product_lookup = product_lookup
        self.write_attempts = write_attempts or CART_WRITE_ATTEMPTS

    def _run_cycle(self, cycle: Callable[..., Cart], *args) -> Cart:
        return conflict_retry(self.write_attempts)(cycle)(*args)

    def _persist(self, cart: Cart) -> Cart:
        cart.updated_at = _now()
        if cart.version == 0:
            return self.store.create(cart)
        return self.store.update(cart, expected_version=cart.version)

    def _load_existing(self, owner: str) -> Cart:
        cart = self.store.get(owner)
        if cart is None:
            raise CartNotFound(owner)
        return cart

    #query
    def list_items(self, owner: str) -> List[CartLine]:
        _require_owner(owner)

        cart = self.store.get(owner)
        if cart is None:
            return []

        #live catalog data here, the stored snapshot only feeds the total
        lines = []
        for item in cart.items:
            product = self.product_lookup.get_product(item.product_id)
            if product is None:
                logger.info(f"Product {item.product_id} no longer in catalog, skipping")
                continue
            lines.append(
                CartLine(item_id=item.product_id, product=product, quantity=item.quantity)
            )
        return lines

    #commands
    def add_item(self, owner: str, product_id: str, quantity: int) -> Cart:
        _require_owner(owner)
        _require_product_id(product_id)
        _validate_quantity(quantity)

        logger.info(f"Fetching product {product_id} from catalog")
        product = self.product_lookup.get_product(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        return self._run_cycle(self._add_item_once, owner, product, quantity)

    def _add_item_once(self, owner: str, product: Product, quantity: int) -> Cart:
        cart = self.store.get(owner)
        if cart is None:
            cart = Cart(owner=owner)

        item = cart.add_product(product, quantity)
        saved = self._persist(cart)

        logger.info(
            f"Product {product.id} in cart of {owner}, quantity {item.quantity}, "
            f"version {saved.version}"
        )
        return saved

    def remove_item(self, owner: str, product_id: str) -> Cart:
        _require_owner(owner)
        _require_product_id(product_id)

        return self._run_cycle(self._remove_item_once, owner, product_id)

    def _remove_item_once(self, owner: str, product_id: str) -> Cart:
        cart = self._load_existing(owner)
        if cart.remove_item(product_id) is None:
            raise ItemNotFound(product_id)

        saved = self._persist(cart)
        logger.info(f"Product {product_id} removed from cart of {owner}, version {saved.version}")
        return saved

    def update_quantity(self, owner: str, product_id: str, quantity: int) -> Cart:
        _require_owner(owner)
        _require_product_id(product_id)
        _validate_quantity(quantity)

        return self._run_cycle(self._update_quantity_once, owner, product_id, quantity)

    def _update_quantity_once(self, owner: str, product_id: str, quantity: int) -> Cart:
        cart = self._load_existing(owner)
        #sets, does not add
        if cart.set_quantity(product_id, quantity) is None:
            raise ItemNotFound(product_id)

        saved = self._persist(cart)
        logger.info(
            f"Quantity of {product_id} in cart of {owner} set to {quantity}, "
            f"version {saved.version}"
        )
        return saved

    def clear(self, owner: str) -> None:
        _require_owner(owner)

        self.store.delete(owner)
        logger.info(f"Cart of {owner} cleared")
