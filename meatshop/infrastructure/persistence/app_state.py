"""
The application state container

One explicitly owned object holding everything that is persisted. Carts and
sessions are deliberately not part of it.
"""

from dataclasses import dataclass, field

from meatshop.domain.entities.order_entity import Order
from meatshop.domain.entities.product_entity import Product
from meatshop.domain.entities.settings_entity import ShopSettings
from meatshop.infrastructure.persistence.defaults import (
    default_products,
    default_settings,
    sample_orders,
)


@dataclass
class AppState:
    """Persisted snapshot: settings, catalog and order history"""

    settings: ShopSettings = field(default_factory=default_settings)
    products: list[Product] = field(default_factory=default_products)
    orders: list[Order] = field(default_factory=sample_orders)
