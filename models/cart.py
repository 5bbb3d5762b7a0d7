# models/cart.py
import logging
from dataclasses import dataclass

from models.customer import Customer
from models.product import Product

logger = logging.getLogger("shopping.cart")

# Cart model representing a customer's pending purchase.
@dataclass
class CartItem:
    product: Product
    qty: int

class Cart:
    def __init__(self, customer: Customer):
        self.customer = customer
        self.items: dict[str, CartItem] = {}  # sku -> item

    def add(self, product: Product, qty: int = 1):
        self._validate(product, qty)
        self.items[product.sku] = CartItem(product, qty)
        logger.debug(f"cart {self.customer.customer_id}: add {product.sku} x {qty}")

    def edit(self, product: Product, qty: int):
        if product.sku not in self.items:
            raise ValueError(f"Product '{product.name}' is not in the cart")
        self._validate(product, qty)
        self.items[product.sku] = CartItem(product, qty)
        logger.debug(f"cart {self.customer.customer_id}: edit {product.sku} -> {qty}")

    def remove(self, product: Product):
        self.items.pop(product.sku, None)

    def get_products(self) -> dict[str, CartItem]:
        # live view, callers may mutate it
        return self.items

    def quantity_of(self, product: Product) -> int:
        item = self.items.get(product.sku)
        return item.qty if item else 0

    def is_empty(self) -> bool:
        return not self.items

    def clear(self):
        self.items.clear()

    def _validate(self, product: Product, qty: int):
        if qty <= 0:
            raise ValueError("The quantity must be a positive number.")
        if product.count < qty:
            raise ValueError(
                f"Cannot add product '{product.name}' to the cart: "
                "not enough units in stock"
            )
