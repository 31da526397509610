# app/repos/image_repo.py
from sqlalchemy.orm import Session, undefer

from app.data.models.image import ImageModel


class ImageRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_image(self, image_id: int, with_data: bool = False) -> ImageModel | None:
        query = self.db.query(ImageModel).filter(ImageModel.id == image_id)
        if with_data:
            query = query.options(undefer(ImageModel.data))
        return query.one_or_none()

    def add_image(self, image: ImageModel) -> ImageModel:
        self.db.add(image)
        self.db.flush()
        return image

    def delete_image(self, image: ImageModel) -> None:
        self.db.delete(image)
        self.db.commit()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
