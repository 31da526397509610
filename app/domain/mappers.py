# app/domain/mappers.py
"""
Jawne konwersje model ORM -> schema odpowiedzi.
Jedna funkcja na pare encja/DTO.
"""
from decimal import Decimal

from app.data.models import (
    CartItemModel,
    CartModel,
    CategoryModel,
    ImageModel,
    OrderItemModel,
    OrderModel,
    ProductModel,
    UserModel,
)
from app.domain.order_status import OrderStatus
from app.domain.schemas import (
    CartItemOut,
    CartOut,
    CategoryOut,
    ImageOut,
    OrderItemOut,
    OrderOut,
    ProductOut,
    UserOut,
)


def category_to_out(category: CategoryModel) -> CategoryOut:
    return CategoryOut(id=category.id, name=category.name)


def image_to_out(image: ImageModel) -> ImageOut:
    return ImageOut(id=image.id, file_name=image.file_name, download_url=image.download_url)


def product_to_out(product: ProductModel) -> ProductOut:
    return ProductOut(
        id=product.id,
        name=product.name,
        brand=product.brand,
        price=product.price,
        inventory=product.inventory,
        description=product.description,
        category=category_to_out(product.category) if product.category else None,
        images=[image_to_out(i) for i in product.images],
    )


def cart_item_to_out(item: CartItemModel) -> CartItemOut:
    return CartItemOut(
        item_id=item.id,
        quantity=item.quantity,
        unit_price=item.unit_price,
        total_price=item.total_price,
        product=product_to_out(item.product),
    )


def cart_to_out(cart: CartModel) -> CartOut:
    return CartOut(
        cart_id=cart.id,
        user_id=cart.user_id,
        items=[cart_item_to_out(i) for i in cart.items],
        total_amount=cart.total_amount if cart.total_amount is not None else Decimal("0.00"),
    )


def order_item_to_out(item: OrderItemModel) -> OrderItemOut:
    return OrderItemOut(
        product_id=item.product_id,
        product_name=item.product.name,
        product_brand=item.product.brand,
        quantity=item.quantity,
        price=item.price,
    )


def order_to_out(order: OrderModel) -> OrderOut:
    return OrderOut(
        id=order.id,
        user_id=order.user_id,
        order_date=order.order_date,
        total_amount=order.total_amount,
        status=OrderStatus(order.status),
        items=[order_item_to_out(i) for i in order.items],
    )


def user_to_out(user: UserModel) -> UserOut:
    return UserOut(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        orders=[order_to_out(o) for o in user.orders],
        cart=cart_to_out(user.cart) if user.cart else None,
    )
