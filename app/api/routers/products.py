# app/api/routers/products.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import require_role
from app.data.database import get_db
from app.data.models.product import ProductModel
from app.domain.exceptions import NotFoundError
from app.domain.mappers import product_to_out
from app.domain.schemas import ApiResponse, ProductIn
from app.security.principal import ROLE_ADMIN
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])

admin_only = require_role(ROLE_ADMIN)


def get_service(db: Session):
    return ProductService(db)


def _found(products: list[ProductModel]) -> ApiResponse:
    if not products:
        raise NotFoundError("No products found")
    return ApiResponse(message="success", data=[product_to_out(p) for p in products])


@router.get("/all", response_model=ApiResponse)
def get_all_products(db: Session = Depends(get_db)):
    products = get_service(db).get_all_products()
    return ApiResponse(message="success", data=[product_to_out(p) for p in products])


@router.get("/product/{product_id}/product", response_model=ApiResponse)
def get_product_by_id(product_id: int, db: Session = Depends(get_db)):
    product = get_service(db).get_product_by_id(product_id)
    return ApiResponse(message="success", data=product_to_out(product))


@router.post("/add", response_model=ApiResponse, dependencies=[Depends(admin_only)])
def add_product(payload: ProductIn, db: Session = Depends(get_db)):
    product = get_service(db).add_product(payload)
    return ApiResponse(message="Add product success!", data=product_to_out(product))


@router.put(
    "/product/{product_id}/update",
    response_model=ApiResponse,
    dependencies=[Depends(admin_only)],
)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    product = get_service(db).update_product(product_id, payload)
    return ApiResponse(message="Update product success!", data=product_to_out(product))


@router.delete(
    "/product/{product_id}/delete",
    response_model=ApiResponse,
    dependencies=[Depends(admin_only)],
)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    get_service(db).delete_product_by_id(product_id)
    return ApiResponse(message="Delete product success!", data=product_id)


@router.get("/products/by/brand-and-name", response_model=ApiResponse)
def get_products_by_brand_and_name(
    brand_name: str = Query(..., alias="brandName"),
    product_name: str = Query(..., alias="productName"),
    db: Session = Depends(get_db),
):
    return _found(get_service(db).get_products_by_brand_and_name(brand_name, product_name))


@router.get("/products/by/category-and-brand", response_model=ApiResponse)
def get_products_by_category_and_brand(
    category: str = Query(...),
    brand: str = Query(...),
    db: Session = Depends(get_db),
):
    return _found(get_service(db).get_products_by_category_and_brand(category, brand))


@router.get("/products/{name}/products", response_model=ApiResponse)
def get_products_by_name(name: str, db: Session = Depends(get_db)):
    return _found(get_service(db).get_products_by_name(name))


@router.get("/product/by-brand", response_model=ApiResponse)
def get_products_by_brand(brand: str = Query(...), db: Session = Depends(get_db)):
    return _found(get_service(db).get_products_by_brand(brand))


@router.get("/product/{category}/all/products", response_model=ApiResponse)
def get_products_by_category(category: str, db: Session = Depends(get_db)):
    return _found(get_service(db).get_products_by_category(category))


@router.get("/product/count/by-brand/and-name", response_model=ApiResponse)
def count_products_by_brand_and_name(
    brand: str = Query(...),
    name: str = Query(...),
    db: Session = Depends(get_db),
):
    count = get_service(db).count_products_by_brand_and_name(brand, name)
    return ApiResponse(message="Product count!", data=count)
