"""
Cart Management Use Case

Handles adding and removing cart lines for a customer session.
"""

import logging

from meatshop.application.dtos.cart_dtos import CartSummary
from meatshop.domain.entities.cart_entity import Cart
from meatshop.domain.repositories.product_repository import ProductRepository
from meatshop.infrastructure.utilities.exceptions import ProductNotFoundError, ValidationError


class CartManagementUseCase:
    """Use case for cart management operations"""

    def __init__(self, product_repository: ProductRepository):
        self._product_repository = product_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def add_to_cart(self, cart: Cart, product_id: str, weight_in_kg: float) -> CartSummary:
        """Add weight of a listed product, merging with an existing line"""
        product = await self._product_repository.find_by_id(product_id)
        if product is None or not product.available:
            raise ProductNotFoundError(product_id)

        try:
            item = cart.add(product, weight_in_kg)
        except ValueError as e:
            raise ValidationError(str(e), "weight") from e

        self._logger.info(
            "🛒 Added %skg of %s (line now %.2fkg)", weight_in_kg, product_id, item.quantity_in_kg
        )
        return CartSummary.from_cart(cart)

    def remove_from_cart(self, cart: Cart, product_id: str) -> CartSummary:
        if cart.remove(product_id):
            self._logger.info("🛒 Removed %s from cart", product_id)
        return CartSummary.from_cart(cart)

    def get_cart_summary(self, cart: Cart) -> CartSummary:
        return CartSummary.from_cart(cart)
