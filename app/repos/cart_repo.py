# app/repos/cart_repo.py
from typing import Any, Dict

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: int) -> CartModel | None:
        return self.db.get(CartModel, cart_id)

    def get_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.query(CartModel).filter(CartModel.user_id == user_id).one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def delete_cart(self, cart: CartModel) -> None:
        user = cart.user
        #pozycje usuwane kaskadowo razem z koszykiem
        self.db.delete(cart)
        self.db.flush()
        if user is not None:
            self.db.expire(user, ["cart"])

    def update_cart_version(self, cart_id: int, old_version: int, new_data: Dict[str, Any]) -> int:
        """
        UPDATE carts SET ... WHERE id = :id AND version = :old_version
        Zwraca liczbe zmienionych wierszy (0 = ktos nas wyprzedzil).
        """
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(**new_data)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
