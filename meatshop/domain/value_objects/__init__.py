"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .money import Money, format_currency
from .order_id import OrderId, short_ref
from .phone_number import PhoneNumber
from .product_id import ProductId

__all__ = [
    "Money",
    "format_currency",
    "OrderId",
    "short_ref",
    "PhoneNumber",
    "ProductId",
]
