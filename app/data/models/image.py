from sqlalchemy import Column, Integer, String, ForeignKey, LargeBinary
from sqlalchemy.orm import relationship, deferred

from app.data.database import Base


class ImageModel(Base):
    __tablename__ = "images"

    id = Column(Integer, primary_key=True)
    file_name = Column(String(255), nullable=False)
    file_type = Column(String(100), nullable=False)
    # blob ladowany tylko przy pobieraniu pliku
    data = deferred(Column(LargeBinary, nullable=False))
    download_url = Column(String(255), nullable=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)

    product = relationship("ProductModel", back_populates="images")
