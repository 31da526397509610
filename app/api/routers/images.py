# app/api/routers/images.py
from typing import List

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.mappers import image_to_out
from app.domain.schemas import ApiResponse
from app.services.image_service import ImageFile, ImageService

router = APIRouter(prefix="/images", tags=["images"])


def get_service(db: Session):
    return ImageService(db)


async def _read(upload: UploadFile) -> ImageFile:
    return ImageFile(
        file_name=upload.filename or "unnamed",
        content_type=upload.content_type or "application/octet-stream",
        content=await upload.read(),
    )


@router.post("/upload", response_model=ApiResponse)
async def save_images(
    product_id: int = Query(..., alias="productId"),
    files: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
):
    payload = [await _read(f) for f in files]
    images = get_service(db).save_images(product_id, payload)
    return ApiResponse(message="Upload success!", data=[image_to_out(i) for i in images])


@router.get("/image/download/{image_id}")
def download_image(image_id: int, db: Session = Depends(get_db)):
    image = get_service(db).get_image_by_id(image_id, with_data=True)
    return Response(
        content=image.data,
        media_type=image.file_type,
        headers={"Content-Disposition": f'attachment; filename="{image.file_name}"'},
    )


@router.put("/image/{image_id}/update", response_model=ApiResponse)
async def update_image(
    image_id: int,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
):
    get_service(db).update_image(image_id, await _read(file))
    return ApiResponse(message="Update success!", data=None)


@router.delete("/image/{image_id}/delete", response_model=ApiResponse)
def delete_image(image_id: int, db: Session = Depends(get_db)):
    get_service(db).delete_image_by_id(image_id)
    return ApiResponse(message="Delete success!", data=None)
