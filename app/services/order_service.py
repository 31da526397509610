# app/services/order_service.py
from datetime import date
from decimal import Decimal
from typing import Iterable

from redis.exceptions import RedisError
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.domain.exceptions import (
    CheckoutInProgressError,
    InsufficientInventoryError,
    InvalidStatusTransitionError,
    NotFoundError,
    PermissionDeniedError,
)
from app.domain.order_status import OrderStatus, can_transition
from app.repos.order_repo import OrderRepo
from app.repos.product_repo import ProductRepo
from app.security.principal import Principal
from app.services.cart_service import CartService
from app.services.lock_service import LockService
from app.services.notification_service import NotificationService
from app.utils.settings import ALLOW_NEGATIVE_INVENTORY, CHECKOUT_LOCK_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


def calculate_order_total(items: Iterable[OrderItemModel]) -> Decimal:
    return sum((i.price * i.quantity for i in items), Decimal("0.00"))


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Separacja od CartService: koszyk jest tylko zrodlem danych dla zamowienia.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        allow_negative_inventory: bool = ALLOW_NEGATIVE_INVENTORY,
    ):
        self.repo = OrderRepo(db)
        self.product_repo = ProductRepo(db)
        self.cart_service = CartService(db)
        self.lock_service = lock_service
        self.notification_service = NotificationService()
        self.allow_negative_inventory = allow_negative_inventory

    def place_order(self, user_id: int) -> OrderModel:
        """
        Use Case: Zlozenie zamowienia z koszyka uzytkownika.

        1. Pobiera koszyk uzytkownika
        2. Tworzy zamowienie PENDING z dzisiejsza data
        3. Dla kazdej pozycji zmniejsza stan magazynowy i kopiuje ilosc i cene
        4. Liczy total zamowienia
        5. Zapisuje zamowienie i usuwa koszyk, wszystko w jednej transakcji
        6. Wysyla powiadomienie (async)
        """
        cart = self.cart_service.get_cart_by_user_id(user_id)
        if not cart:
            raise NotFoundError("Cart not found")

        cart_id = cart.id
        token = self.lock_service.acquire_checkout_lock(cart_id, ttl=CHECKOUT_LOCK_TTL_SECONDS)
        if token is None:
            raise CheckoutInProgressError("Checkout for this cart is already in progress")

        try:
            #pozycje czytane przed lockiem, zmiana koszyka w miedzyczasie = konflikt
            self.cart_service.claim_version(cart)
            order = self._create_order(cart)
            self.repo.add_order(order)
            self.cart_service.delete_cart(cart)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise
        finally:
            self._release_lock(cart_id, token)

        logger.info(f"Order {order.id} placed by user {user_id}, total {order.total_amount}")

        try:
            self.notification_service.send_order_notification(
                user_id, order.id, order.total_amount
            )
        except Exception as e:
            #zamowienie juz zapisane, powiadomienie jest best-effort
            logger.warning(f"Failed to dispatch notification for order {order.id}: {e}")

        return order

    def _release_lock(self, cart_id: int, token: str) -> None:
        try:
            self.lock_service.release_checkout_lock(cart_id, token)
        except RedisError as e:
            #lock i tak wygasnie po TTL
            logger.warning(f"Failed to release checkout lock for cart {cart_id}: {e}")

    def _create_order(self, cart: CartModel) -> OrderModel:
        order = OrderModel(
            user_id=cart.user_id,
            status=OrderStatus.PENDING.value,
            order_date=date.today(),
        )

        for cart_item in list(cart.items):
            self._decrement_inventory(cart_item.product_id, cart_item.quantity)
            order.items.append(
                OrderItemModel(
                    product_id=cart_item.product_id,
                    quantity=cart_item.quantity,
                    price=cart_item.unit_price if cart_item.unit_price is not None else Decimal("0.00"),
                )
            )

        order.total_amount = calculate_order_total(order.items)
        return order

    def _decrement_inventory(self, product_id: int, quantity: int) -> None:
        rowcount = self.product_repo.decrement_inventory(
            product_id,
            quantity,
            require_stock=not self.allow_negative_inventory,
        )
        if rowcount == 0:
            raise InsufficientInventoryError(
                f"Not enough inventory for product {product_id}"
            )

    #query
    def get_order(self, order_id: int) -> OrderModel:
        order = self.repo.get_order(order_id)
        if not order:
            raise NotFoundError("Order not found")
        return order

    def get_user_orders(self, user_id: int) -> list[OrderModel]:
        return self.repo.get_orders_by_user(user_id)

    @staticmethod
    def check_access(user_id: int, principal: Principal) -> None:
        if user_id != principal.id and not principal.is_admin:
            raise PermissionDeniedError("You don't have permission to these orders")

    def update_order_status(self, order_id: int, status: OrderStatus) -> OrderModel:
        order = self.get_order(order_id)
        current = OrderStatus(order.status)

        if not can_transition(current, status):
            raise InvalidStatusTransitionError(
                f"Cannot change order status from {current.value} to {status.value}"
            )

        updated = self.repo.update_order_status(order_id, status.value)
        logger.info(f"Order {order_id} status {current.value} -> {status.value}")
        return updated
