"""
Dependency Injection Container

Owns the loaded application state and wires repositories, services and use
cases around it. There is no global container; each entry point builds one.
"""

import logging
from typing import Any, Dict

from meatshop.application.use_cases.cart_management_use_case import CartManagementUseCase
from meatshop.application.use_cases.login_use_case import LoginUseCase
from meatshop.application.use_cases.order_analytics_use_case import OrderAnalyticsUseCase
from meatshop.application.use_cases.order_creation_use_case import OrderCreationUseCase
from meatshop.application.use_cases.order_status_management_use_case import (
    OrderStatusManagementUseCase,
)
from meatshop.application.use_cases.product_catalog_use_case import ProductCatalogUseCase
from meatshop.application.use_cases.shop_settings_use_case import ShopSettingsUseCase
from meatshop.config import Settings, get_config
from meatshop.domain.repositories.order_repository import OrderRepository
from meatshop.domain.repositories.product_repository import ProductRepository
from meatshop.domain.repositories.settings_repository import SettingsRepository
from meatshop.infrastructure.persistence.app_state import AppState
from meatshop.infrastructure.persistence.json_store import JsonStateStore
from meatshop.infrastructure.repositories.json_order_repository import JsonOrderRepository
from meatshop.infrastructure.repositories.json_product_repository import JsonProductRepository
from meatshop.infrastructure.repositories.json_settings_repository import (
    JsonSettingsRepository,
)
from meatshop.infrastructure.services.geolocation_service import GeolocationService


class DependencyContainer:
    """
    Dependency injection container

    Manages the instantiation of:
    - The state store and the loaded snapshot
    - Repositories over that snapshot
    - Services and use cases
    """

    def __init__(
        self,
        config: Settings | None = None,
        store: JsonStateStore | None = None,
        geolocation_service: GeolocationService | None = None,
    ):
        self.config = config or get_config()
        self.store = store or JsonStateStore(self.config.store_path)
        self._instances: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)
        self.state: AppState = self.store.load()
        self._setup_dependencies(geolocation_service)

    def _setup_dependencies(self, geolocation_service: GeolocationService | None):
        """Setup all dependencies and their relationships"""
        self._logger.info("Setting up dependency injection container...")

        self._register_repositories()

        self._instances["geolocation_service"] = geolocation_service or GeolocationService(
            lookup_url=self.config.geolocation_url,
            timeout_seconds=self.config.geolocation_timeout_seconds,
        )

        self._register_use_cases()

        self._logger.info("Dependency injection container setup complete")

    def _register_repositories(self):
        self._instances["product_repository"] = JsonProductRepository(self.state, self.store)
        self._instances["order_repository"] = JsonOrderRepository(self.state, self.store)
        self._instances["settings_repository"] = JsonSettingsRepository(self.state, self.store)

        self._logger.debug("Repositories registered successfully")

    def _register_use_cases(self):
        """Register use case implementations with their dependencies"""
        self._instances["product_catalog_use_case"] = ProductCatalogUseCase(
            product_repository=self.get_product_repository()
        )

        self._instances["cart_management_use_case"] = CartManagementUseCase(
            product_repository=self.get_product_repository()
        )

        self._instances["order_creation_use_case"] = OrderCreationUseCase(
            order_repository=self.get_order_repository(),
            settings_repository=self.get_settings_repository(),
            geolocation_service=self.get_geolocation_service(),
        )

        self._instances["order_status_management_use_case"] = OrderStatusManagementUseCase(
            order_repository=self.get_order_repository()
        )

        self._instances["order_analytics_use_case"] = OrderAnalyticsUseCase(
            order_repository=self.get_order_repository()
        )

        self._instances["shop_settings_use_case"] = ShopSettingsUseCase(
            settings_repository=self.get_settings_repository()
        )

        self._instances["login_use_case"] = LoginUseCase(
            settings_repository=self.get_settings_repository(),
            otp_delay_seconds=self.config.otp_delay_seconds,
        )

        self._logger.debug("Use cases registered successfully")

    def reset_to_defaults(self) -> AppState:
        """Replace everything stored with the seed data and rewire"""
        self._logger.warning("Resetting store %s to defaults", self.store.path)
        geolocation_service = self.get_geolocation_service()
        self.state = AppState()
        self.store.save(self.state)
        self._instances.clear()
        self._setup_dependencies(geolocation_service)
        return self.state

    # Repository getters
    def get_product_repository(self) -> ProductRepository:
        return self._instances["product_repository"]

    def get_order_repository(self) -> OrderRepository:
        return self._instances["order_repository"]

    def get_settings_repository(self) -> SettingsRepository:
        return self._instances["settings_repository"]

    # Service getters
    def get_geolocation_service(self) -> GeolocationService:
        return self._instances["geolocation_service"]

    # Use Case getters
    def get_product_catalog_use_case(self) -> ProductCatalogUseCase:
        return self._instances["product_catalog_use_case"]

    def get_cart_management_use_case(self) -> CartManagementUseCase:
        return self._instances["cart_management_use_case"]

    def get_order_creation_use_case(self) -> OrderCreationUseCase:
        return self._instances["order_creation_use_case"]

    def get_order_status_management_use_case(self) -> OrderStatusManagementUseCase:
        return self._instances["order_status_management_use_case"]

    def get_order_analytics_use_case(self) -> OrderAnalyticsUseCase:
        return self._instances["order_analytics_use_case"]

    def get_shop_settings_use_case(self) -> ShopSettingsUseCase:
        return self._instances["shop_settings_use_case"]

    def get_login_use_case(self) -> LoginUseCase:
        return self._instances["login_use_case"]
