"""
Cart Entity - the customer's pending selection
"""

from dataclasses import dataclass, field

from meatshop.domain.entities.product_entity import Product, to_finite_float


@dataclass
class CartItem:
    """One cart line; price is the per-kg price captured when added"""

    product_id: str
    name: str
    quantity_in_kg: float
    price: float

    @property
    def line_total(self) -> float:
        return self.price * self.quantity_in_kg


@dataclass
class Cart:
    """
    Ephemeral cart owned by one customer session.

    Holds at most one line per product id; repeated adds grow that line.
    There is no stock count, so quantities are unbounded.
    """

    items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, weight_in_kg: float) -> CartItem:
        """Add weight of a product, merging into an existing line"""
        weight_in_kg = to_finite_float(weight_in_kg, "Weight")
        if weight_in_kg <= 0:
            raise ValueError("Weight must be greater than zero")

        existing = self.get(product.id)
        if existing:
            existing.quantity_in_kg += weight_in_kg
            return existing

        item = CartItem(
            product_id=product.id,
            name=product.name,
            quantity_in_kg=weight_in_kg,
            price=product.price_per_kg,
        )
        self.items.append(item)
        return item

    def remove(self, product_id: str) -> bool:
        """Drop the whole line for a product"""
        before = len(self.items)
        self.items = [item for item in self.items if item.product_id != product_id]
        return len(self.items) != before

    def get(self, product_id: str) -> CartItem | None:
        return next((item for item in self.items if item.product_id == product_id), None)

    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def clear(self):
        self.items = []

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)
