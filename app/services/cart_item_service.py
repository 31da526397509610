from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.exceptions import BadRequestError, NotFoundError
from app.services.cart_service import CartService, item_total
from app.services.product_service import ProductService
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartItemService:
    """
    Zmiany pozycji koszyka. Po kazdej zmianie total koszyka
    jest liczony od nowa z wszystkich pozycji.
    """

    def __init__(self, db: Session):
        self.cart_service = CartService(db)
        self.product_service = ProductService(db)

    @staticmethod
    def _find_item(cart: CartModel, product_id: int) -> CartItemModel | None:
        return next((i for i in cart.items if i.product_id == product_id), None)

    def get_cart_item(self, cart_id: int, product_id: int) -> CartItemModel:
        cart = self.cart_service.get_cart(cart_id)
        item = self._find_item(cart, product_id)
        if not item:
            raise NotFoundError("Item not found")
        return item

    def add_item(self, cart_id: int, product_id: int, quantity: int) -> CartModel:
        if quantity <= 0:
            raise BadRequestError("Quantity must be greater than 0")

        cart = self.cart_service.get_cart(cart_id)
        product = self.product_service.get_product_by_id(product_id)

        item = self._find_item(cart, product_id)

        if item is None:
            logger.info(f"Dodaje nowy produkt {product_id} do koszyka {cart_id}")
            item = CartItemModel(
                product=product,
                quantity=quantity,
                unit_price=product.price,
            )
            cart.items.append(item)
        else:
            logger.info(
                f"Produkt {product_id} juz jest w koszyku, zwiekszam ilosc "
                f"z {item.quantity} do {item.quantity + quantity}"
            )
            item.quantity += quantity

        item.total_price = item_total(item)

        return self.cart_service.save_totals(cart)

    def remove_item(self, cart_id: int, product_id: int) -> CartModel:
        cart = self.cart_service.get_cart(cart_id)

        item = self._find_item(cart, product_id)
        if not item:
            raise NotFoundError("Item not found")

        logger.info(f"Usuwanie produktu {product_id} z koszyka {cart_id}")
        #delete-orphan usuwa wiersz przy flush
        cart.items.remove(item)

        return self.cart_service.save_totals(cart)

    def update_item_quantity(self, cart_id: int, product_id: int, quantity: int) -> CartModel:
        """
        Ustawia ilosc i odswieza cene jednostkowa z aktualnej ceny produktu.
        Brak produktu w koszyku to no-op (tylko ostrzezenie w logu).
        """
        if quantity <= 0:
            raise BadRequestError("Quantity must be greater than 0")

        cart = self.cart_service.get_cart(cart_id)

        item = self._find_item(cart, product_id)
        if item is None:
            logger.warning(
                f"Produkt {product_id} nie jest w koszyku {cart_id}, pomijam zmiane ilosci"
            )
        else:
            item.quantity = quantity
            item.unit_price = item.product.price
            item.total_price = item_total(item)

        return self.cart_service.save_totals(cart)
