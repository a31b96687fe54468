"""
Order Status Management Use Case

Handles admin status updates and post-checkout bill adjustments.
"""

import logging

from meatshop.application.dtos.order_dtos import BillAdjustmentRequest
from meatshop.domain.entities.order_entity import Order, OrderStatus
from meatshop.domain.repositories.order_repository import OrderRepository
from meatshop.infrastructure.utilities.exceptions import (
    BusinessLogicError,
    OrderLockedError,
    OrderNotFoundError,
    ValidationError,
)


class OrderStatusManagementUseCase:
    """Use case for managing order status transitions and bills"""

    STATUS_EMOJIS = {
        OrderStatus.PENDING: "⏳",
        OrderStatus.DELIVERED: "✅",
        OrderStatus.CANCELLED: "❌",
    }

    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def update_order_status(self, order_id: str, new_status: OrderStatus | str) -> Order:
        """Move an order along the status machine"""
        order = await self._get_order(order_id)
        old_status = order.status

        try:
            order.transition_to(new_status)
        except ValueError as e:
            allowed = ", ".join(s.value for s in Order.STATUS_TRANSITIONS.get(old_status, ()))
            self._logger.error("💥 STATUS UPDATE ERROR: Order %s, %s", order_id, e)
            raise BusinessLogicError(
                f"{e}. Valid transitions from {old_status.value}: {allowed or 'none'}"
            ) from e

        await self._order_repository.save_order(order)
        self._logger.info(
            "%s STATUS UPDATED: Order #%s %s → %s",
            self.STATUS_EMOJIS.get(order.status, ""),
            order.short_ref,
            old_status.value,
            order.status.value,
        )
        return order

    async def mark_delivered(self, order_id: str) -> Order:
        return await self.update_order_status(order_id, OrderStatus.DELIVERED)

    async def adjust_bill(self, request: BillAdjustmentRequest) -> Order:
        """
        Overwrite bill fields and recompute the total.

        Finalized orders are locked until reopened. With ``finalize`` set the
        bill is locked after the changes are applied.
        """
        order = await self._get_order(request.order_id)
        if order.is_finalized:
            raise OrderLockedError(order.id)

        try:
            order.adjust_bill(**request.changes)
        except ValueError as e:
            raise ValidationError(str(e), "bill") from e

        if request.finalize:
            order.finalize()

        await self._order_repository.save_order(order)
        self._logger.info(
            "🧾 BILL ADJUSTED: Order #%s subtotal=%.2f delivery=%.2f tax=%.2f discount=%.2f total=%.2f%s",
            order.short_ref,
            order.subtotal,
            order.delivery_charge,
            order.tax,
            order.discount,
            order.total,
            " (finalized)" if order.is_finalized else "",
        )
        return order

    async def reopen_bill(self, order_id: str) -> Order:
        """Unlock a finalized bill for further edits"""
        order = await self._get_order(order_id)
        if order.is_finalized:
            order.reopen()
            await self._order_repository.save_order(order)
            self._logger.info("🔓 BILL REOPENED: Order #%s", order.short_ref)
        return order

    async def get_order(self, order_id: str) -> Order:
        return await self._get_order(order_id)

    async def get_orders_by_status(self, status: OrderStatus) -> list[Order]:
        return await self._order_repository.get_all_orders(status)

    async def get_pending_orders(self) -> list[Order]:
        return await self.get_orders_by_status(OrderStatus.PENDING)

    async def _get_order(self, order_id: str) -> Order:
        order = await self._order_repository.get_order_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order
