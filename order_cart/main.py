# order_cart/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from order_cart.api.errors import register_error_handlers
from order_cart.api.routers import carts, health
from order_cart.repos import CartStore, build_cart_store
from order_cart.services.cart_service import CartService
from order_cart.services.product_client import ProductClient, ProductLookup
from order_cart.services.token_verifier import TokenVerifier
from order_cart.utils.logging import get_logger
from order_cart.utils.settings import CART_STORE_BACKEND

logger = get_logger(__name__)


def create_app(
    cart_store: CartStore | None = None,
    product_lookup: ProductLookup | None = None,
    token_verifier: TokenVerifier | None = None,
) -> FastAPI:
    store = cart_store or build_cart_store(CART_STORE_BACKEND)
    cart_service = CartService(
        store=store,
        product_lookup=product_lookup or ProductClient(),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Opening cart store {store.__class__.__name__}")
        store.open()
        try:
            yield
        finally:
            store.close()
            logger.info("Cart store closed")

    app = FastAPI(
        title="Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.cart_service = cart_service
    app.state.token_verifier = token_verifier or TokenVerifier()

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(carts.router)

    return app


if __name__ == "__main__":
    uvicorn.run("order_cart.main:create_app", factory=True, host="0.0.0.0", port=8000)
