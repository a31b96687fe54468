"""
Application DTOs
"""

from .cart_dtos import CartLine, CartSummary
from .order_dtos import (
    BillAdjustmentRequest,
    CheckoutRequest,
    DashboardStats,
    OrderCreationResponse,
    OrderPreview,
)

__all__ = [
    "BillAdjustmentRequest",
    "CartLine",
    "CartSummary",
    "CheckoutRequest",
    "DashboardStats",
    "OrderCreationResponse",
    "OrderPreview",
]
