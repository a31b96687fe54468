"""
Product catalog use case

Handles customer browsing and admin catalog maintenance.
"""

import logging
from pathlib import Path

from meatshop.domain.entities.product_entity import Product
from meatshop.domain.repositories.product_repository import ProductRepository
from meatshop.infrastructure.services.image_service import file_to_data_uri
from meatshop.infrastructure.utilities.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ProductCatalogUseCase:
    """
    Use case for product catalog operations

    Handles:
    1. Customer listing with search
    2. Availability toggling (the stand-in for deletion)
    3. Adding and editing products
    4. Embedding product pictures
    """

    def __init__(self, product_repository: ProductRepository):
        self._product_repository = product_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_visible_products(self, search: str = "") -> list[Product]:
        """Products a customer can see for a search term"""
        products = await self._product_repository.find_all()
        visible = [p for p in products if p.is_listed_for(search)]
        self._logger.debug("Search %r matched %d of %d products", search, len(visible), len(products))
        return visible

    async def get_all_products(self) -> list[Product]:
        return await self._product_repository.find_all()

    async def toggle_availability(self, product_id: str) -> Product | None:
        """Flip availability; unknown ids are ignored"""
        product = await self._product_repository.find_by_id(product_id)
        if product is None:
            self._logger.info("Toggle ignored, no product %s", product_id)
            return None

        product.toggle_availability()
        await self._product_repository.save(product)
        self._logger.info(
            "Product %s is now %s", product_id, "available" if product.available else "disabled"
        )
        return product

    def new_product_draft(self) -> Product:
        return Product.new_draft()

    async def save_product(self, product: Product) -> Product:
        """Insert or replace a product by id"""
        try:
            product.validate()
        except ValueError as e:
            raise ValidationError(str(e), "product") from e
        return await self._product_repository.save(product)

    async def attach_image(self, product: Product, image_path: str | Path) -> Product:
        """Embed a picture into an unsaved product draft"""
        product.image = await file_to_data_uri(image_path)
        return product
