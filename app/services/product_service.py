# app/services/product_service.py
from sqlalchemy.orm import Session

from app.data.models.category import CategoryModel
from app.data.models.product import ProductModel
from app.domain.exceptions import AlreadyExistsError, NotFoundError, ResourceInUseError
from app.domain.schemas import ProductIn
from app.repos.category_repo import CategoryRepo
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Katalog produktow: CRUD oraz proste filtry
    (kategoria, marka, nazwa i ich kombinacje).
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)
        self.category_repo = CategoryRepo(db)

    def _get_or_create_category(self, name: str) -> CategoryModel:
        category = self.category_repo.get_by_name(name)
        if category:
            return category
        logger.info(f"Kategoria {name} nie istnieje, tworze nowa")
        return self.category_repo.add_category(CategoryModel(name=name))

    #commands
    def add_product(self, payload: ProductIn) -> ProductModel:
        if self.repo.exists_by_name_and_brand(payload.name, payload.brand):
            raise AlreadyExistsError(
                f"{payload.name} {payload.brand} already exists, you may update it!"
            )

        category = self._get_or_create_category(payload.category.name)

        product = ProductModel(
            name=payload.name,
            brand=payload.brand,
            price=payload.price,
            inventory=payload.inventory,
            description=payload.description,
            category=category,
        )
        created = self.repo.save(product)
        logger.info(f"Dodano produkt {created.id} ({created.brand} {created.name})")
        return created

    def update_product(self, product_id: int, payload: ProductIn) -> ProductModel:
        product = self.get_product_by_id(product_id)

        product.name = payload.name
        product.brand = payload.brand
        product.price = payload.price
        product.inventory = payload.inventory
        product.description = payload.description
        product.category = self._get_or_create_category(payload.category.name)

        return self.repo.save(product)

    def delete_product_by_id(self, product_id: int) -> None:
        product = self.get_product_by_id(product_id)
        if self.repo.is_referenced(product_id):
            #pozycje zamowien trzymaja FK do produktu, historia musi sie dalej ladowac
            raise ResourceInUseError(
                f"Product {product_id} is used in orders or carts and cannot be deleted"
            )
        self.repo.delete_product(product)
        logger.info(f"Usunieto produkt {product_id}")

    #query
    def get_product_by_id(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found!")
        return product

    def get_all_products(self) -> list[ProductModel]:
        return self.repo.get_all()

    def get_products_by_category(self, category: str) -> list[ProductModel]:
        return self.repo.find_by_category_name(category)

    def get_products_by_brand(self, brand: str) -> list[ProductModel]:
        return self.repo.find_by_brand(brand)

    def get_products_by_category_and_brand(self, category: str, brand: str) -> list[ProductModel]:
        return self.repo.find_by_category_name_and_brand(category, brand)

    def get_products_by_name(self, name: str) -> list[ProductModel]:
        return self.repo.find_by_name(name)

    def get_products_by_brand_and_name(self, brand: str, name: str) -> list[ProductModel]:
        return self.repo.find_by_brand_and_name(brand, name)

    def count_products_by_brand_and_name(self, brand: str, name: str) -> int:
        return self.repo.count_by_brand_and_name(brand, name)
