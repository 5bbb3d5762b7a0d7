# models/product.py
from dataclasses import dataclass
# Product model representing an inventory record in the shop.
# eq=False keeps identity hashing; carts key their entries by sku instead.
@dataclass(eq=False)
class Product:
    sku: str
    name: str
    count: int = 0

    def add_count(self, qty: int) -> None:
        if qty <= 0:
            raise ValueError("New inventory must be a positive number.")
        self.count += qty

    def subtract_count(self, qty: int) -> None:
        if qty <= 0:
            raise ValueError("The quantity must be a positive number.")
        if self.count < qty:
            raise ValueError(f"Insufficient stock for {self.name}")
        self.count -= qty
