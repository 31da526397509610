from decimal import Decimal
from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.user import UserModel
from app.domain.exceptions import (
    ConcurrencyConflictError,
    NotFoundError,
    PermissionDeniedError,
)
from app.repos.cart_repo import CartRepo
from app.security.principal import Principal
from app.utils.logging import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0.00")


def item_total(item: CartItemModel) -> Decimal:
    """unit_price * quantity, brak ceny liczony jako zero."""
    unit_price = item.unit_price if item.unit_price is not None else ZERO
    return unit_price * item.quantity


def calculate_total(items: Iterable[CartItemModel]) -> Decimal:
    #zawsze pelne przeliczenie, bez przyrostowych delt
    return sum((item_total(i) for i in items), ZERO)


class CartService:
    """
    Prosta implementacja use case dla domeny cart
    commands (initialize, clear) modyfikuja stan
    query (get, total) tylko odczyt
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    #query - odczyt
    def get_cart(self, cart_id: int) -> CartModel:
        cart = self.repo.get_cart(cart_id)
        if not cart:
            raise NotFoundError("Cart not found")
        return cart

    def get_total_price(self, cart_id: int) -> Decimal:
        return self.get_cart(cart_id).total_amount

    def get_cart_by_user_id(self, user_id: int) -> CartModel | None:
        return self.repo.get_cart_by_user(user_id)

    @staticmethod
    def check_access(cart: CartModel, principal: Principal) -> None:
        if cart.user_id != principal.id and not principal.is_admin:
            raise PermissionDeniedError("You don't have permission to this cart")

    #commands
    def initialize_new_cart(self, user: UserModel) -> CartModel:
        existing = self.repo.get_cart_by_user(user.id)
        if existing:
            return existing

        try:
            created = self.repo.create_cart(
                CartModel(user_id=user.id, total_amount=ZERO, version=1)
            )
        except IntegrityError:
            #rownolegly request zdazyl utworzyc koszyk (unique na user_id)
            self.repo.rollback()
            return self.repo.get_cart_by_user(user.id)

        logger.info(f"Utworzono nowy koszyk {created.id} dla uzytkownika {user.id}")
        return created

    def clear_cart(self, cart_id: int) -> None:
        """Usuwa pozycje i sam koszyk, nie tylko go oproznia."""
        cart = self.get_cart(cart_id)
        self.delete_cart(cart)
        self.repo.commit()
        logger.info(f"Koszyk {cart_id} usuniety")

    def delete_cart(self, cart: CartModel) -> None:
        """Usuniecie bez commita, do uzycia wewnatrz wiekszej transakcji."""
        self.repo.delete_cart(cart)

    def claim_version(self, cart: CartModel) -> None:
        """
        Podbija wersje bez commita. Koszyk zmieniony przez kogos innego
        od chwili odczytu -> ConcurrencyConflictError, wolajacy robi rollback.
        """
        rowcount = self.repo.update_cart_version(
            cart_id=cart.id,
            old_version=cart.version,
            new_data={"version": cart.version + 1},
        )
        if rowcount == 0:
            raise ConcurrencyConflictError(
                "Cart was modified by another request, please retry"
            )

    def save_totals(self, cart: CartModel) -> CartModel:
        """
        Przelicza total koszyka i zapisuje go z podbiciem wersji.

        Optimistic locking: UPDATE ... WHERE version = :old,
        0 wierszy oznacza, ze inny request zmienil koszyk w miedzyczasie.
        """
        total = calculate_total(cart.items)
        old_version = cart.version

        rowcount = self.repo.update_cart_version(
            cart_id=cart.id,
            old_version=old_version,
            new_data={
                "version": old_version + 1,
                "total_amount": total,
            },
        )

        if rowcount == 0:
            self.repo.rollback()
            raise ConcurrencyConflictError(
                "Cart was modified by another request, please retry"
            )

        self.repo.commit()

        logger.info(f"Koszyk {cart.id} total {total}, nowa wersja: {old_version + 1}")
        return cart
