# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import Any, List
from decimal import Decimal
from datetime import date

from app.domain.order_status import OrderStatus


class ApiResponse(BaseModel):
    """Koperta kazdej odpowiedzi JSON."""

    message: str
    data: Any = None


# =====================================================
# CATALOG
# =====================================================
class CategoryIn(BaseModel):
    """Schema dla tworzenia / zmiany kategorii."""

    name: str = Field(..., min_length=1, max_length=100, description="Nazwa kategorii (unikalna)")


class CategoryOut(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ImageOut(BaseModel):
    id: int
    file_name: str
    download_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductIn(BaseModel):
    """Schema dla dodawania i aktualizacji produktu."""

    name: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, decimal_places=2, description="Cena jednostkowa")
    inventory: int = Field(..., ge=0, description="Stan magazynowy")
    description: str | None = None
    category: CategoryIn


class ProductOut(BaseModel):
    id: int
    name: str
    brand: str
    price: Decimal
    inventory: int
    description: str | None = None
    category: CategoryOut | None = None
    images: List[ImageOut] = []


# =====================================================
# CART
# =====================================================
class CartItemOut(BaseModel):
    """Schema dla produktu w koszyku (response)."""

    item_id: int
    quantity: int
    unit_price: Decimal | None
    total_price: Decimal
    product: ProductOut


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    cart_id: int
    user_id: int
    items: List[CartItemOut]
    total_amount: Decimal


# =====================================================
# ORDER
# =====================================================
class OrderItemOut(BaseModel):
    product_id: int
    product_name: str
    product_brand: str
    quantity: int
    price: Decimal


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: int
    user_id: int
    order_date: date
    total_amount: Decimal
    status: OrderStatus
    items: List[OrderItemOut]


# =====================================================
# USERS / AUTH
# =====================================================
class UserCreate(BaseModel):
    """Schema dla tworzenia uzytkownika."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72, description="Haslo w postaci jawnej")


class UserUpdate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class UserOut(BaseModel):
    """Schema dla uzytkownika (response)."""

    id: int
    first_name: str
    last_name: str
    email: str
    orders: List[OrderOut] = []
    cart: CartOut | None = None


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class JwtOut(BaseModel):
    id: int
    token: str
