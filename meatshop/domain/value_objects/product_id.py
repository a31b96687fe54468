"""Product ID value object"""

import time
from dataclasses import dataclass

from meatshop.infrastructure.utilities.constants import CatalogSettings


@dataclass(frozen=True)
class ProductId:
    """Product ID value object"""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Product ID cannot be empty")

    @classmethod
    def generate(cls) -> "ProductId":
        """Timestamp-derived id for a new catalog entry"""
        return cls(f"{CatalogSettings.PRODUCT_ID_PREFIX}{time.time_ns() // 1_000_000}")

    def __str__(self) -> str:
        return self.value
