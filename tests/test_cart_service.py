import logging
from decimal import Decimal

import pytest

from app.data.models.cart_item import CartItemModel
from app.domain.exceptions import BadRequestError, ConcurrencyConflictError, NotFoundError
from app.services.cart_item_service import CartItemService
from app.services.cart_service import CartService, calculate_total
from app.services.product_service import ProductService
from app.domain.schemas import CategoryIn, ProductIn


def _expected_total(cart):
    return sum((i.unit_price * i.quantity for i in cart.items), Decimal("0.00"))


@pytest.fixture
def cart(db, user):
    return CartService(db).initialize_new_cart(user)


def test_initialize_new_cart_is_lazy_and_idempotent(db, user):
    svc = CartService(db)
    assert svc.get_cart_by_user_id(user.id) is None

    first = svc.initialize_new_cart(user)
    second = svc.initialize_new_cart(user)

    assert first.id == second.id
    assert first.total_amount == Decimal("0.00")
    assert first.items == []


def test_add_new_product_snapshots_current_price(db, cart, make_product):
    product = make_product(price="10.00")

    updated = CartItemService(db).add_item(cart.id, product.id, 2)

    assert len(updated.items) == 1
    item = updated.items[0]
    assert item.unit_price == Decimal("10.00")
    assert item.quantity == 2
    assert item.total_price == Decimal("20.00")
    assert updated.total_amount == Decimal("20.00")


def test_adding_same_product_twice_increments_quantity(db, cart, make_product):
    product = make_product()
    svc = CartItemService(db)

    svc.add_item(cart.id, product.id, 1)
    updated = svc.add_item(cart.id, product.id, 3)

    assert len(updated.items) == 1
    assert updated.items[0].quantity == 4
    assert updated.total_amount == Decimal("40.00")


def test_total_matches_items_after_every_mutation(db, cart, make_product):
    a = make_product(name="A", price="10.00")
    b = make_product(name="B", price="5.50")
    c = make_product(name="C", price="0.99")
    svc = CartItemService(db)

    steps = [
        lambda: svc.add_item(cart.id, a.id, 2),
        lambda: svc.add_item(cart.id, b.id, 1),
        lambda: svc.add_item(cart.id, c.id, 7),
        lambda: svc.update_item_quantity(cart.id, b.id, 4),
        lambda: svc.remove_item(cart.id, a.id),
        lambda: svc.add_item(cart.id, a.id, 1),
        lambda: svc.update_item_quantity(cart.id, c.id, 1),
    ]

    for step in steps:
        current = step()
        assert current.total_amount == _expected_total(current)
        for item in current.items:
            assert item.total_price == item.unit_price * item.quantity

    assert current.total_amount == Decimal("10.00") + Decimal("22.00") + Decimal("0.99")


def test_remove_item_not_in_cart_fails(db, cart, make_product):
    product = make_product()

    with pytest.raises(NotFoundError):
        CartItemService(db).remove_item(cart.id, product.id)


def test_remove_item_recomputes_total(db, cart, make_product):
    a = make_product(name="A", price="10.00")
    b = make_product(name="B", price="5.00")
    svc = CartItemService(db)
    svc.add_item(cart.id, a.id, 1)
    svc.add_item(cart.id, b.id, 2)

    updated = svc.remove_item(cart.id, a.id)

    assert [i.product_id for i in updated.items] == [b.id]
    assert updated.total_amount == Decimal("10.00")


def test_add_item_unknown_cart_or_product(db, cart, make_product):
    product = make_product()
    svc = CartItemService(db)

    with pytest.raises(NotFoundError):
        svc.add_item(9999, product.id, 1)

    with pytest.raises(NotFoundError):
        svc.add_item(cart.id, 9999, 1)


def test_add_item_rejects_non_positive_quantity(db, cart, make_product):
    product = make_product()

    with pytest.raises(BadRequestError):
        CartItemService(db).add_item(cart.id, product.id, 0)


def test_update_quantity_uses_current_product_price(db, cart, make_product):
    product = make_product(price="10.00")
    svc = CartItemService(db)
    svc.add_item(cart.id, product.id, 1)

    ProductService(db).update_product(
        product.id,
        ProductIn(
            name=product.name,
            brand=product.brand,
            price=Decimal("12.50"),
            inventory=product.inventory,
            category=CategoryIn(name="Peripherals"),
        ),
    )

    updated = svc.update_item_quantity(cart.id, product.id, 2)

    assert updated.items[0].unit_price == Decimal("12.50")
    assert updated.items[0].total_price == Decimal("25.00")
    assert updated.total_amount == Decimal("25.00")


def test_update_quantity_for_missing_item_is_a_logged_noop(db, cart, make_product, caplog):
    in_cart = make_product(name="A")
    not_in_cart = make_product(name="B")
    svc = CartItemService(db)
    svc.add_item(cart.id, in_cart.id, 2)

    with caplog.at_level(logging.WARNING, logger="app.services.cart_item_service"):
        updated = svc.update_item_quantity(cart.id, not_in_cart.id, 5)

    assert [(i.product_id, i.quantity) for i in updated.items] == [(in_cart.id, 2)]
    assert updated.total_amount == Decimal("20.00")
    assert "nie jest w koszyku" in caplog.text


def test_get_total_price_and_missing_cart(db, cart, make_product):
    product = make_product(price="3.00")
    CartItemService(db).add_item(cart.id, product.id, 3)
    svc = CartService(db)

    assert svc.get_total_price(cart.id) == Decimal("9.00")

    with pytest.raises(NotFoundError):
        svc.get_cart(9999)
    with pytest.raises(NotFoundError):
        svc.get_total_price(9999)


def test_clear_cart_deletes_the_cart_itself(db, user, cart, make_product):
    product = make_product()
    CartItemService(db).add_item(cart.id, product.id, 1)
    cart_id = cart.id
    svc = CartService(db)

    svc.clear_cart(cart_id)

    with pytest.raises(NotFoundError):
        svc.get_cart(cart_id)
    assert svc.get_cart_by_user_id(user.id) is None
    assert db.query(CartItemModel).count() == 0

    fresh = svc.initialize_new_cart(user)
    assert fresh.id != cart_id
    assert fresh.items == []


def test_missing_unit_price_counts_as_zero():
    items = [
        CartItemModel(quantity=3, unit_price=None),
        CartItemModel(quantity=2, unit_price=Decimal("4.00")),
    ]

    assert calculate_total(items) == Decimal("8.00")


def test_stale_cart_version_is_rejected(session_factory, db, cart, make_product):
    a = make_product(name="A")
    b = make_product(name="B")

    other = session_factory()
    try:
        # druga sesja czyta koszyk w wersji 1
        stale_cart = other.get(type(cart), cart.id)
        assert stale_cart.version == 1

        CartItemService(db).add_item(cart.id, a.id, 1)

        with pytest.raises(ConcurrencyConflictError):
            CartItemService(other).add_item(cart.id, b.id, 1)
    finally:
        other.close()

    db.expire_all()
    fresh = CartService(db).get_cart(cart.id)
    assert [i.product_id for i in fresh.items] == [a.id]
    assert fresh.version == 2


def test_get_cart_item(db, cart, make_product):
    product = make_product()
    svc = CartItemService(db)
    svc.add_item(cart.id, product.id, 2)

    item = svc.get_cart_item(cart.id, product.id)
    assert item.quantity == 2
    assert item.product.name == product.name

    with pytest.raises(NotFoundError):
        svc.get_cart_item(cart.id, 9999)
