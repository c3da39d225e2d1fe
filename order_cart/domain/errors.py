# order_cart/domain/errors.py
"""
Cart domain errors.

Each kind maps to its own HTTP status in ``order_cart.api.errors``;
the transport never collapses them into a generic failure.
"""


class CartError(Exception):
    """Base exception for the cart domain."""

    code = "CART_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.code
        super().__init__(self.message)


class Unauthenticated(CartError):
    """No verified owner identity present."""

    code = "UNAUTHENTICATED"


class ValidationError(CartError):
    """Missing or malformed quantity or identifiers."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ProductNotFound(CartError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str):
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class CartNotFound(CartError):
    code = "CART_NOT_FOUND"

    def __init__(self, owner: str):
        super().__init__("Cart not found")
        self.owner = owner


class ItemNotFound(CartError):
    code = "ITEM_NOT_FOUND"

    def __init__(self, product_id: str):
        super().__init__(f"Item '{product_id}' not found in cart")
        self.product_id = product_id


class ConcurrentModification(CartError):
    """The conditional write lost the optimistic race."""

    code = "CONCURRENT_MODIFICATION"

    def __init__(self, owner: str, expected_version: int | None = None):
        super().__init__("Cart was modified by another request")
        self.owner = owner
        self.expected_version = expected_version


class ProductLookupTimeout(CartError):
    code = "PRODUCT_LOOKUP_TIMEOUT"

    def __init__(self, product_id: str):
        super().__init__(f"Catalog did not answer in time for product '{product_id}'")
        self.product_id = product_id


class CatalogUnavailable(CartError):
    code = "CATALOG_UNAVAILABLE"
