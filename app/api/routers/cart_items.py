# app/api/routers/cart_items.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_principal
from app.data.database import get_db
from app.domain.mappers import cart_to_out
from app.domain.schemas import ApiResponse
from app.security.principal import Principal
from app.services.cart_item_service import CartItemService
from app.services.user_service import UserService

router = APIRouter(prefix="/cartItems", tags=["cart items"])


def get_service(db: Session):
    return CartItemService(db)


@router.post("/item/add", response_model=ApiResponse)
def add_item_to_cart(
    product_id: int = Query(..., alias="productId", gt=0),
    quantity: int = Query(..., gt=0),
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    user = UserService(db).get_authenticated_user(principal)
    #koszyk tworzony leniwie przy pierwszym dodaniu
    cart = svc.cart_service.initialize_new_cart(user)
    cart = svc.add_item(cart.id, product_id, quantity)
    return ApiResponse(message="Add Item Success", data=cart_to_out(cart))


@router.delete("/cart/{cart_id}/item/{product_id}/remove", response_model=ApiResponse)
def remove_item_from_cart(
    cart_id: int,
    product_id: int,
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    svc.cart_service.check_access(svc.cart_service.get_cart(cart_id), principal)
    cart = svc.remove_item(cart_id, product_id)
    return ApiResponse(message="Remove Item Success", data=cart_to_out(cart))


@router.put("/cart/{cart_id}/item/{product_id}/update", response_model=ApiResponse)
def update_item_quantity(
    cart_id: int,
    product_id: int,
    quantity: int = Query(..., gt=0),
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    svc.cart_service.check_access(svc.cart_service.get_cart(cart_id), principal)
    cart = svc.update_item_quantity(cart_id, product_id, quantity)
    return ApiResponse(message="Update Item Success", data=cart_to_out(cart))
