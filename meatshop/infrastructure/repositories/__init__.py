"""
Repository implementations over the JSON state snapshot
"""

from .json_order_repository import JsonOrderRepository
from .json_product_repository import JsonProductRepository
from .json_settings_repository import JsonSettingsRepository

__all__ = ["JsonOrderRepository", "JsonProductRepository", "JsonSettingsRepository"]
