"""
Application use cases
"""

from .cart_management_use_case import CartManagementUseCase
from .login_use_case import LoginResult, LoginUseCase
from .order_analytics_use_case import OrderAnalyticsUseCase
from .order_creation_use_case import OrderCreationUseCase
from .order_status_management_use_case import OrderStatusManagementUseCase
from .product_catalog_use_case import ProductCatalogUseCase
from .shop_settings_use_case import ShopSettingsUseCase

__all__ = [
    "CartManagementUseCase",
    "LoginResult",
    "LoginUseCase",
    "OrderAnalyticsUseCase",
    "OrderCreationUseCase",
    "OrderStatusManagementUseCase",
    "ProductCatalogUseCase",
    "ShopSettingsUseCase",
]
