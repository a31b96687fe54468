"""
Cart DTOs

Data Transfer Objects for cart operations.
"""

from dataclasses import dataclass
from typing import List

from meatshop.domain.entities.cart_entity import Cart


@dataclass
class CartLine:
    """One cart line as shown on the cart page"""

    product_id: str
    name: str
    quantity_in_kg: float
    unit_price: float
    line_total: float


@dataclass
class CartSummary:
    """Cart contents and running subtotal"""

    lines: List[CartLine]
    subtotal: float

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartSummary":
        return cls(
            lines=[
                CartLine(
                    product_id=item.product_id,
                    name=item.name,
                    quantity_in_kg=item.quantity_in_kg,
                    unit_price=item.price,
                    line_total=item.line_total,
                )
                for item in cart.items
            ],
            subtotal=cart.subtotal(),
        )
