# app/repos/product_repo.py
from sqlalchemy import func, update
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.data.models.category import CategoryModel
from app.data.models.product import ProductModel
from app.data.models.order_item import OrderItemModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_all(self) -> list[ProductModel]:
        return self.db.query(ProductModel).order_by(ProductModel.id).all()

    def find_by_category_name(self, category: str) -> list[ProductModel]:
        return (
            self.db.query(ProductModel)
            .join(ProductModel.category)
            .filter(CategoryModel.name == category)
            .order_by(ProductModel.id)
            .all()
        )

    def find_by_brand(self, brand: str) -> list[ProductModel]:
        return (
            self.db.query(ProductModel)
            .filter(ProductModel.brand == brand)
            .order_by(ProductModel.id)
            .all()
        )

    def find_by_category_name_and_brand(self, category: str, brand: str) -> list[ProductModel]:
        return (
            self.db.query(ProductModel)
            .join(ProductModel.category)
            .filter(CategoryModel.name == category, ProductModel.brand == brand)
            .order_by(ProductModel.id)
            .all()
        )

    def find_by_name(self, name: str) -> list[ProductModel]:
        return (
            self.db.query(ProductModel)
            .filter(ProductModel.name == name)
            .order_by(ProductModel.id)
            .all()
        )

    def find_by_brand_and_name(self, brand: str, name: str) -> list[ProductModel]:
        return (
            self.db.query(ProductModel)
            .filter(ProductModel.brand == brand, ProductModel.name == name)
            .order_by(ProductModel.id)
            .all()
        )

    def count_by_brand_and_name(self, brand: str, name: str) -> int:
        return (
            self.db.query(func.count(ProductModel.id))
            .filter(ProductModel.brand == brand, ProductModel.name == name)
            .scalar()
        )

    def exists_by_name_and_brand(self, name: str, brand: str) -> bool:
        return self.db.query(
            self.db.query(ProductModel)
            .filter(ProductModel.name == name, ProductModel.brand == brand)
            .exists()
        ).scalar()

    def save(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def is_referenced(self, product_id: int) -> bool:
        """Czy produkt siedzi w jakims zamowieniu albo koszyku."""
        in_orders = self.db.query(OrderItemModel).filter(OrderItemModel.product_id == product_id).exists()
        in_carts = self.db.query(CartItemModel).filter(CartItemModel.product_id == product_id).exists()
        return bool(self.db.query(in_orders).scalar() or self.db.query(in_carts).scalar())

    def delete_product(self, product: ProductModel) -> None:
        self.db.delete(product)
        self.db.commit()

    def decrement_inventory(self, product_id: int, quantity: int, require_stock: bool = True) -> int:
        """
        inventory = inventory - :quantity liczone po stronie bazy,
        dwa rownolegle zamowienia nie nadpisuja sobie stanu.
        Z require_stock dochodzi warunek inventory >= :quantity;
        0 zmienionych wierszy = brak produktu albo za malo sztuk.
        """
        conditions = [ProductModel.id == product_id]
        if require_stock:
            conditions.append(ProductModel.inventory >= quantity)

        result = self.db.execute(
            update(ProductModel)
            .where(*conditions)
            .values(inventory=ProductModel.inventory - quantity)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount
