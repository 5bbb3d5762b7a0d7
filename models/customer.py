# models/customer.py
from dataclasses import dataclass
# Customer identity. The shop only needs it to look up the customer's cart.
@dataclass(frozen=True)
class Customer:
    customer_id: int
    phone: str
