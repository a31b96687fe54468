"""
Domain repository interfaces
"""

from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .settings_repository import SettingsRepository

__all__ = ["OrderRepository", "ProductRepository", "SettingsRepository"]
