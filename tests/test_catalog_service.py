import pytest

from app.domain.exceptions import NotFoundError, ResourceInUseError
from app.domain.mappers import order_to_out
from app.services.cart_item_service import CartItemService
from app.services.cart_service import CartService
from app.services.category_service import CategoryService
from app.services.order_service import OrderService
from app.services.product_service import ProductService


def test_unused_product_can_be_deleted(db, make_product):
    product = make_product()
    svc = ProductService(db)

    svc.delete_product_by_id(product.id)

    with pytest.raises(NotFoundError):
        svc.get_product_by_id(product.id)


def test_product_in_cart_cannot_be_deleted(db, user, make_product):
    product = make_product()
    cart = CartService(db).initialize_new_cart(user)
    CartItemService(db).add_item(cart.id, product.id, 1)

    with pytest.raises(ResourceInUseError):
        ProductService(db).delete_product_by_id(product.id)

    assert ProductService(db).get_product_by_id(product.id).name == product.name


def test_ordered_product_cannot_be_deleted_and_order_still_loads(db, user, make_product, lock_service):
    product = make_product(name="A", price="10.00")
    cart = CartService(db).initialize_new_cart(user)
    CartItemService(db).add_item(cart.id, product.id, 2)
    order = OrderService(db, lock_service).place_order(user.id)
    order_id = order.id

    with pytest.raises(ResourceInUseError):
        ProductService(db).delete_product_by_id(product.id)

    db.expire_all()
    out = order_to_out(OrderService(db, lock_service).get_order(order_id))
    assert [(i.product_name, i.quantity) for i in out.items] == [("A", 2)]


def test_category_with_products_cannot_be_deleted(db, make_product):
    product = make_product(category="Audio")
    svc = CategoryService(db)

    with pytest.raises(ResourceInUseError):
        svc.delete_category_by_id(product.category_id)

    assert svc.get_category_by_name("Audio").id == product.category_id


def test_empty_category_can_be_deleted(db):
    svc = CategoryService(db)
    category = svc.add_category("Empty")

    svc.delete_category_by_id(category.id)

    with pytest.raises(NotFoundError):
        svc.get_category_by_id(category.id)
