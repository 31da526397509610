# app/api/routers/orders.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_lock_service, get_principal, require_role
from app.data.database import get_db
from app.domain.mappers import order_to_out
from app.domain.order_status import OrderStatus
from app.domain.schemas import ApiResponse
from app.security.principal import Principal, ROLE_ADMIN
from app.services.lock_service import LockService
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session = Depends(get_db), lock_service: LockService = Depends(get_lock_service)):
    return OrderService(db, lock_service)


@router.post("/order", response_model=ApiResponse)
def create_order(
    user_id: int = Query(..., alias="userId"),
    principal: Principal = Depends(get_principal),
    svc: OrderService = Depends(get_service),
):
    """
    Tworzy zamowienie z koszyka uzytkownika.
    Wysyla powiadomienie asynchronicznie.
    """
    svc.check_access(user_id, principal)
    order = svc.place_order(user_id)
    return ApiResponse(message="Item Order Success!", data=order_to_out(order))


@router.get("/{order_id}/order", response_model=ApiResponse)
def get_order(
    order_id: int,
    principal: Principal = Depends(get_principal),
    svc: OrderService = Depends(get_service),
):
    order = svc.get_order(order_id)
    svc.check_access(order.user_id, principal)
    return ApiResponse(message="Item Order Success!", data=order_to_out(order))


@router.get("/user/{user_id}/orders", response_model=ApiResponse)
def get_user_orders(
    user_id: int,
    principal: Principal = Depends(get_principal),
    svc: OrderService = Depends(get_service),
):
    svc.check_access(user_id, principal)
    orders = svc.get_user_orders(user_id)
    return ApiResponse(message="Item Order Success!", data=[order_to_out(o) for o in orders])


@router.put(
    "/{order_id}/status",
    response_model=ApiResponse,
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def update_order_status(
    order_id: int,
    status: OrderStatus = Query(...),
    svc: OrderService = Depends(get_service),
):
    order = svc.update_order_status(order_id, status)
    return ApiResponse(message="Order status updated", data=order_to_out(order))
