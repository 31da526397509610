# app/repos/category_repo.py
from sqlalchemy.orm import Session

from app.data.models.category import CategoryModel
from app.data.models.product import ProductModel


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_category(self, category_id: int) -> CategoryModel | None:
        return self.db.get(CategoryModel, category_id)

    def get_by_name(self, name: str) -> CategoryModel | None:
        return self.db.query(CategoryModel).filter(CategoryModel.name == name).one_or_none()

    def exists_by_name(self, name: str) -> bool:
        return self.db.query(
            self.db.query(CategoryModel).filter(CategoryModel.name == name).exists()
        ).scalar()

    def get_all(self) -> list[CategoryModel]:
        return self.db.query(CategoryModel).order_by(CategoryModel.id).all()

    def add_category(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.flush()
        return category

    def save(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def has_products(self, category_id: int) -> bool:
        return self.db.query(
            self.db.query(ProductModel).filter(ProductModel.category_id == category_id).exists()
        ).scalar()

    def delete_category(self, category: CategoryModel) -> None:
        self.db.delete(category)
        self.db.commit()
