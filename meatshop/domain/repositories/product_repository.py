"""
Product repository interface

Defines the contract for catalog data access operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from meatshop.domain.entities.product_entity import Product


class ProductRepository(ABC):
    """Repository interface for product operations"""

    @abstractmethod
    async def find_all(self) -> List[Product]:
        """All products in catalog order, available or not"""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID"""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Replace the product with the same id, or prepend it if new"""
