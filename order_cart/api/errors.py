# order_cart/api/errors.py
"""
Maps cart domain errors to HTTP responses.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from order_cart.domain.errors import (
    CartError,
    CartNotFound,
    CatalogUnavailable,
    ConcurrentModification,
    ItemNotFound,
    ProductLookupTimeout,
    ProductNotFound,
    Unauthenticated,
    ValidationError,
)

_STATUS_BY_ERROR = {
    Unauthenticated: 401,
    ValidationError: 422,
    ProductNotFound: 404,
    CartNotFound: 404,
    ItemNotFound: 404,
    ConcurrentModification: 409,
    ProductLookupTimeout: 504,
    CatalogUnavailable: 502,
}


def cart_error_handler(request: Request, exc: CartError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), 400)

    body = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError) and exc.field:
        body["field"] = exc.field

    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CartError, cart_error_handler)
