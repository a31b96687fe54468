"""
Order Creation Use Case

Handles the business logic for turning a customer's cart into an order.
"""

import logging

from meatshop.application.dtos.order_dtos import (
    CheckoutRequest,
    OrderCreationResponse,
    OrderPreview,
)
from meatshop.domain.entities.cart_entity import Cart
from meatshop.domain.entities.order_entity import DeliveryDetails, Order
from meatshop.domain.repositories.order_repository import OrderRepository
from meatshop.domain.repositories.settings_repository import SettingsRepository
from meatshop.domain.value_objects.order_id import OrderId
from meatshop.infrastructure.services.geolocation_service import GeolocationService
from meatshop.infrastructure.utilities.exceptions import CartEmptyError, ValidationError


class OrderCreationUseCase:
    """Use case for creating orders from cart items"""

    def __init__(
        self,
        order_repository: OrderRepository,
        settings_repository: SettingsRepository,
        geolocation_service: GeolocationService | None = None,
    ):
        self._order_repository = order_repository
        self._settings_repository = settings_repository
        self._geolocation_service = geolocation_service or GeolocationService()
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_order_preview(self, cart: Cart) -> OrderPreview:
        """Totals for the checkout form"""
        settings = await self._settings_repository.get()
        subtotal = cart.subtotal()
        delivery_charge = settings.delivery_charge()
        return OrderPreview(
            subtotal=subtotal,
            delivery_charge=delivery_charge,
            total=subtotal + delivery_charge,
        )

    async def capture_location(self) -> str:
        """
        One-shot location capture for the checkout form.

        Raises GeolocationError; the checkout itself never depends on it.
        """
        return await self._geolocation_service.locate()

    async def create_order(
        self, cart: Cart, request: CheckoutRequest, customer_email: str
    ) -> OrderCreationResponse:
        """Create order from the session cart; clears the cart on success"""
        self._logger.info("📝 ===== ORDER CREATION STARTED =====")
        self._logger.info("📝 ORDER CREATION: customer %s, %d lines", customer_email, len(cart))

        try:
            details = self._validate(cart, request)
        except ValidationError as e:
            self._logger.warning("💥 VALIDATION ERROR: %s", e)
            return OrderCreationResponse(
                success=False, error_message=e.user_message, missing_fields=e.fields
            )

        settings = await self._settings_repository.get()
        order_id = OrderId.generate(await self._order_repository.get_order_ids())
        order = Order.place(
            order_id=order_id.value,
            cart=cart,
            details=details,
            settings=settings,
            customer_email=customer_email,
        )
        await self._order_repository.create_order(order)
        cart.clear()

        self._logger.info(
            "🎉 ORDER %s PLACED: subtotal=%.2f delivery=%.2f total=%.2f",
            order.id,
            order.subtotal,
            order.delivery_charge,
            order.total,
        )
        return OrderCreationResponse(success=True, order=order)

    @staticmethod
    def _validate(cart: Cart, request: CheckoutRequest) -> DeliveryDetails:
        try:
            details = request.to_details()
        except ValueError as e:
            raise ValidationError(
                "Please choose COD or UPI as payment method.", "payment_method"
            ) from e

        missing = details.missing_fields()
        if missing:
            raise ValidationError("Please fill in all delivery details.", fields=missing)

        if cart.is_empty():
            raise CartEmptyError()
        return details
