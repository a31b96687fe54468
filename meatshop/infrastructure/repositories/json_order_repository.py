"""
Snapshot-backed implementation of OrderRepository
"""

import logging

from meatshop.domain.entities.order_entity import Order, OrderStatus
from meatshop.domain.repositories.order_repository import OrderRepository
from meatshop.infrastructure.persistence.app_state import AppState
from meatshop.infrastructure.persistence.json_store import JsonStateStore, managed_snapshot


class JsonOrderRepository(OrderRepository):
    """Order history stored in the application state snapshot, newest first"""

    def __init__(self, state: AppState, store: JsonStateStore):
        self._state = state
        self._store = store
        self._logger = logging.getLogger(self.__class__.__name__)

    async def create_order(self, order: Order) -> Order:
        with managed_snapshot(self._store, self._state) as state:
            state.orders.insert(0, order)
        self._logger.info("Order %s stored (%d orders total)", order.id, len(self._state.orders))
        return order

    async def get_order_by_id(self, order_id: str) -> Order | None:
        return next((o for o in self._state.orders if o.id == order_id), None)

    async def get_orders_by_customer(self, customer_email: str) -> list[Order]:
        return [o for o in self._state.orders if o.customer_email == customer_email]

    async def get_all_orders(self, status: OrderStatus | None = None) -> list[Order]:
        if status is None:
            return list(self._state.orders)
        return [o for o in self._state.orders if o.status == status]

    async def save_order(self, order: Order) -> Order:
        with managed_snapshot(self._store, self._state) as state:
            for index, existing in enumerate(state.orders):
                if existing.id == order.id:
                    state.orders[index] = order
                    break
            else:
                raise KeyError(order.id)
        return order

    async def get_order_ids(self) -> set[str]:
        return {o.id for o in self._state.orders}
