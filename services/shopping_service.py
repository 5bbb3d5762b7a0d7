# services/shopping_service.py
import logging

from data.product_dao import ProductDao
from models.cart import Cart, CartItem
from models.customer import Customer
from models.product import Product
from services.errors import BuyError

logger = logging.getLogger("shopping.service")


class ShoppingService:
    def __init__(self, product_dao: ProductDao):
        self.product_dao = product_dao
        # customer_id -> cart, kept for the lifetime of the service
        self.carts: dict[int, Cart] = {}

    def get_cart(self, customer: Customer) -> Cart:
        cart = self.carts.get(customer.customer_id)
        if cart is None:
            cart = Cart(customer)
            self.carts[customer.customer_id] = cart
        return cart

    def get_all_products(self) -> list[Product]:
        return self.product_dao.get_all()

    def get_product_by_name(self, name: str) -> Product | None:
        return self.product_dao.get_by_name(name)

    def buy(self, cart: Cart) -> bool:
        """
        Turn the cart into inventory decrements.

        Returns False when there is nothing to buy. Lines with a quantity
        of zero or less can only appear if the cart was mutated directly,
        they are skipped. Every line is checked before any product is
        touched, so a BuyError leaves the inventory as it was.
        """
        lines = [it for it in cart.items.values() if it.qty > 0]
        if not lines:
            logger.info(f"buy: cart of customer {cart.customer.customer_id} is empty")
            return False

        # Validate stock for the whole cart first
        for it in lines:
            if it.product.count < it.qty:
                logger.warning(
                    f"buy: {it.product.sku} requested {it.qty}, "
                    f"only {it.product.count} in stock"
                )
                raise BuyError(it.product, it.qty, it.product.count)

        # Deduct stock and persist
        applied: list[CartItem] = []
        try:
            for it in lines:
                it.product.subtract_count(it.qty)
                applied.append(it)
                self.product_dao.save(it.product)
        except Exception:
            logger.exception(
                f"buy: store failed, rolling back {len(applied)} line(s)"
            )
            for it in applied:
                it.product.count += it.qty
            self._restore_store(applied)
            raise

        logger.info(
            f"buy: customer {cart.customer.customer_id} bought "
            + ", ".join(f"{it.product.sku} x {it.qty}" for it in lines)
        )
        cart.clear()
        return True

    def _restore_store(self, applied: list[CartItem]) -> None:
        # Write the restored counts back so the store matches memory again.
        # Best effort: the error that aborted the purchase is the one raised.
        for it in applied:
            try:
                self.product_dao.save(it.product)
            except Exception:
                logger.exception(f"buy: could not restore {it.product.sku} in the store")
