"""
Domain entities package
"""

from .cart_entity import Cart, CartItem
from .order_entity import DeliveryDetails, Order, OrderStatus, PaymentMethod
from .product_entity import Product
from .settings_entity import ShopSettings, UserRole

__all__ = [
    "Cart",
    "CartItem",
    "DeliveryDetails",
    "Order",
    "OrderStatus",
    "PaymentMethod",
    "Product",
    "ShopSettings",
    "UserRole",
]
