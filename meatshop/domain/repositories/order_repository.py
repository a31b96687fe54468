"""
Order repository interface

Defines the contract for order data access operations. Orders are never
deleted.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Set

from meatshop.domain.entities.order_entity import Order, OrderStatus


class OrderRepository(ABC):
    """Repository interface for order operations"""

    @abstractmethod
    async def create_order(self, order: Order) -> Order:
        """Store a new order at the front of the list"""

    @abstractmethod
    async def get_order_by_id(self, order_id: str) -> Optional[Order]:
        """Get order by ID"""

    @abstractmethod
    async def get_orders_by_customer(self, customer_email: str) -> List[Order]:
        """Get orders placed under a session identity"""

    @abstractmethod
    async def get_all_orders(self, status: Optional[OrderStatus] = None) -> List[Order]:
        """Get all orders, newest first, optionally filtered by status"""

    @abstractmethod
    async def save_order(self, order: Order) -> Order:
        """Persist changes to an existing order"""

    @abstractmethod
    async def get_order_ids(self) -> Set[str]:
        """Identifiers already in use"""
