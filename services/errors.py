# services/errors.py
from models.product import Product


class BuyError(Exception):
    # Raised when a cart line asks for more units than the product has.

    def __init__(self, product: Product, requested: int, available: int):
        self.product = product
        self.requested = requested
        self.available = available
        self.missing = requested - available
        super().__init__(
            f"Not enough units of product {product.name} in stock: "
            f"requested {requested}, available {available}, missing {self.missing}"
        )
