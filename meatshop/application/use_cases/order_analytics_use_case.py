"""
Order Analytics Use Case

Dashboard numbers for the admin and order history for customers.
"""

import logging

from meatshop.application.dtos.order_dtos import DashboardStats
from meatshop.domain.entities.order_entity import Order, OrderStatus
from meatshop.domain.repositories.order_repository import OrderRepository


class OrderAnalyticsUseCase:
    """Use case for order statistics"""

    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_dashboard_stats(self) -> DashboardStats:
        """Gross sales over every order, and the pending queue size"""
        orders = await self._order_repository.get_all_orders()
        stats = DashboardStats(
            gross_sales=sum(order.total or 0 for order in orders),
            pending_count=sum(1 for order in orders if order.status == OrderStatus.PENDING),
            order_count=len(orders),
        )
        self._logger.debug("📊 Dashboard: %s", stats)
        return stats

    async def get_customer_orders(self, customer_email: str) -> list[Order]:
        """Order history for the signed-in identity, newest first"""
        return await self._order_repository.get_orders_by_customer(customer_email)
