# app/services/category_service.py
from sqlalchemy.orm import Session

from app.data.models.category import CategoryModel
from app.domain.exceptions import AlreadyExistsError, NotFoundError, ResourceInUseError
from app.repos.category_repo import CategoryRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.repo = CategoryRepo(db)

    def get_category_by_id(self, category_id: int) -> CategoryModel:
        category = self.repo.get_category(category_id)
        if not category:
            raise NotFoundError("Category not found!")
        return category

    def get_category_by_name(self, name: str) -> CategoryModel:
        category = self.repo.get_by_name(name)
        if not category:
            raise NotFoundError("Category not found!")
        return category

    def get_all_categories(self) -> list[CategoryModel]:
        return self.repo.get_all()

    def add_category(self, name: str) -> CategoryModel:
        if self.repo.exists_by_name(name):
            raise AlreadyExistsError(f"{name} already exists")

        category = self.repo.save(CategoryModel(name=name))
        logger.info(f"Utworzono kategorie {category.id} ({name})")
        return category

    def update_category(self, category_id: int, name: str) -> CategoryModel:
        category = self.get_category_by_id(category_id)

        other = self.repo.get_by_name(name)
        if other and other.id != category.id:
            raise AlreadyExistsError(f"{name} already exists")

        category.name = name
        return self.repo.save(category)

    def delete_category_by_id(self, category_id: int) -> None:
        category = self.get_category_by_id(category_id)
        if self.repo.has_products(category_id):
            raise ResourceInUseError(f"Category {category.name} still has products")
        self.repo.delete_category(category)
        logger.info(f"Usunieto kategorie {category_id}")
