#order_cart/api/routers/carts.py
from fastapi import APIRouter, Depends, Header, Request, Response

from order_cart.domain.schemas import (
    CartListOut,
    CartOut,
    CartSummaryOut,
    ItemIn,
    MessageOut,
    QuantityIn,
)
from order_cart.services.cart_service import CartService

router = APIRouter(tags=["carts"])


def get_service(request: Request) -> CartService:
    return request.app.state.cart_service


def get_owner(request: Request, authorization: str | None = Header(default=None)) -> str:
    return request.app.state.token_verifier.verify(authorization)


@router.post("/adicionarItem", response_model=CartOut)
def add_item(
    payload: ItemIn,
    response: Response,
    owner: str = Depends(get_owner),
    svc: CartService = Depends(get_service),
):
    cart = svc.add_item(owner, payload.product_id, payload.quantity)
    #version 1 means this call created the cart
    response.status_code = 201 if cart.version == 1 else 200
    return cart


@router.get("/carrinho", response_model=CartListOut)
def list_cart(
    owner: str = Depends(get_owner),
    svc: CartService = Depends(get_service),
):
    return {"items": svc.list_items(owner)}


@router.put("/carrinho/{item_id}", response_model=CartOut)
def update_quantity(
    item_id: str,
    payload: QuantityIn,
    owner: str = Depends(get_owner),
    svc: CartService = Depends(get_service),
):
    return svc.update_quantity(owner, item_id, payload.quantity)


@router.delete("/carrinho/{product_id}", response_model=CartSummaryOut)
def remove_item(
    product_id: str,
    owner: str = Depends(get_owner),
    svc: CartService = Depends(get_service),
):
    return svc.remove_item(owner, product_id)


@router.delete("/carrinho", response_model=MessageOut)
def clear_cart(
    owner: str = Depends(get_owner),
    svc: CartService = Depends(get_service),
):
    svc.clear(owner)
    return {"detail": "Cart removed"}
