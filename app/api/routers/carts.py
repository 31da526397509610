#app/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_principal
from app.data.database import get_db
from app.domain.mappers import cart_to_out
from app.domain.schemas import ApiResponse
from app.security.principal import Principal
from app.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


def get_service(db: Session):
    return CartService(db)


def _owned_cart(svc: CartService, cart_id: int, principal: Principal):
    cart = svc.get_cart(cart_id)
    svc.check_access(cart, principal)
    return cart


@router.get("/{cart_id}/my-cart", response_model=ApiResponse)
def get_cart(
    cart_id: int,
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    cart = _owned_cart(svc, cart_id, principal)
    return ApiResponse(message="Success", data=cart_to_out(cart))


@router.delete("/{cart_id}/clear", response_model=ApiResponse)
def clear_cart(
    cart_id: int,
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    _owned_cart(svc, cart_id, principal)
    svc.clear_cart(cart_id)
    return ApiResponse(message="Clear Cart Success!", data=None)


@router.get("/{cart_id}/cart/total-price", response_model=ApiResponse)
def get_total_amount(
    cart_id: int,
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    _owned_cart(svc, cart_id, principal)
    return ApiResponse(message="Total Price", data=svc.get_total_price(cart_id))
