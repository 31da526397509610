# app/services/image_service.py
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.data.models.image import ImageModel
from app.domain.exceptions import NotFoundError
from app.repos.image_repo import ImageRepo
from app.services.product_service import ProductService
from app.utils.settings import API_PREFIX
from app.utils.logging import get_logger

logger = get_logger(__name__)

DOWNLOAD_PATH = f"{API_PREFIX}/images/image/download/"


@dataclass
class ImageFile:
    """Plik odebrany z requestu, juz wczytany do pamieci."""

    file_name: str
    content_type: str
    content: bytes


class ImageService:
    def __init__(self, db: Session):
        self.repo = ImageRepo(db)
        self.product_service = ProductService(db)

    def get_image_by_id(self, image_id: int, with_data: bool = False) -> ImageModel:
        image = self.repo.get_image(image_id, with_data=with_data)
        if not image:
            raise NotFoundError(f"No image found with id: {image_id}")
        return image

    def delete_image_by_id(self, image_id: int) -> None:
        image = self.get_image_by_id(image_id)
        self.repo.delete_image(image)
        logger.info(f"Usunieto obraz {image_id}")

    def save_images(self, product_id: int, files: list[ImageFile]) -> list[ImageModel]:
        product = self.product_service.get_product_by_id(product_id)

        saved = []
        try:
            for f in files:
                image = self.repo.add_image(
                    ImageModel(
                        file_name=f.file_name,
                        file_type=f.content_type,
                        data=f.content,
                        product=product,
                    )
                )
                #id znane dopiero po flush
                image.download_url = f"{DOWNLOAD_PATH}{image.id}"
                saved.append(image)
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Zapisano {len(saved)} obraz(y) dla produktu {product_id}")
        return saved

    def update_image(self, image_id: int, file: ImageFile) -> ImageModel:
        image = self.get_image_by_id(image_id)
        image.file_name = file.file_name
        image.file_type = file.content_type
        image.data = file.content
        self.repo.commit()
        return image
