"""
Product Entity - Core business logic for catalog items
"""

import math
from dataclasses import dataclass

from meatshop.domain.value_objects.product_id import ProductId
from meatshop.infrastructure.utilities.constants import CatalogSettings


def to_finite_float(value, label: str) -> float:
    """Read a numeric form value; text like "650" is accepted, NaN and infinity are not"""
    if value is None or isinstance(value, bool):
        raise ValueError(f"{label} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number") from None
    if not math.isfinite(number):
        raise ValueError(f"{label} must be a finite number")
    return number


@dataclass
class Product:
    """Product domain entity, priced per kilogram"""

    id: str
    name: str
    description: str
    price_per_kg: float
    image: str
    available: bool = True
    category: str = CatalogSettings.DEFAULT_CATEGORY

    def toggle_availability(self):
        self.available = not self.available

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on the name; empty term matches all"""
        return (search or "").lower() in self.name.lower()

    def is_listed_for(self, search: str) -> bool:
        """Customer visibility rule"""
        return self.available and self.matches(search)

    def validate(self):
        """Check the fields an admin must fill before saving"""
        if not self.name or not self.name.strip():
            raise ValueError("Product name cannot be empty")
        price = to_finite_float(self.price_per_kg, "Price per kg")
        if price < 0:
            raise ValueError("Price per kg cannot be negative")
        self.price_per_kg = price

    @classmethod
    def new_draft(cls) -> "Product":
        """Blank product for the admin's 'new item' form"""
        return cls(
            id=ProductId.generate().value,
            name="",
            description="",
            price_per_kg=0.0,
            image=CatalogSettings.PLACEHOLDER_IMAGE,
            available=True,
            category=CatalogSettings.DEFAULT_CATEGORY,
        )
