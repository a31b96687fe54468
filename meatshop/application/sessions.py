"""
Role sessions

Signing in yields either a CustomerSession or an AdminSession. Each one
exposes only the actions its role may take. Every action returns an
ActionResult; failures carry the alert text for the user.
"""

import dataclasses
import logging
from typing import TYPE_CHECKING, Union

from meatshop.application.dtos.order_dtos import BillAdjustmentRequest, CheckoutRequest
from meatshop.domain.entities.cart_entity import Cart
from meatshop.domain.entities.order_entity import Order, OrderStatus
from meatshop.domain.entities.product_entity import Product
from meatshop.domain.entities.settings_entity import ShopSettings, UserRole
from meatshop.infrastructure.services import invoice_service
from meatshop.infrastructure.services.link_service import dispatch_link, whatsapp_link
from meatshop.infrastructure.utilities.exceptions import (
    BusinessLogicError,
    ValidationError,
    error_handler,
)

if TYPE_CHECKING:
    from meatshop.application.use_cases.login_use_case import LoginResult
    from meatshop.infrastructure.container.dependency_injection import DependencyContainer

logger = logging.getLogger(__name__)


class _BaseSession:
    role: UserRole

    def __init__(self, container: "DependencyContainer", identity: str):
        self._container = container
        self.identity = identity
        self.active = True
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def _symbol(self) -> str:
        return self._container.config.currency_symbol

    @property
    def _country_code(self) -> str:
        return self._container.config.whatsapp_country_code

    def _require_active(self):
        if not self.active:
            raise BusinessLogicError(
                f"Session for {self.identity} has ended", "Please sign in again."
            )

    async def _settings(self) -> ShopSettings:
        return await self._container.get_shop_settings_use_case().get_settings()

    def logout(self):
        self.active = False
        self._logger.info("👋 LOGOUT: %s", self.identity)


class CustomerSession(_BaseSession):
    """Storefront browsing, cart, checkout and order history"""

    role = UserRole.CUSTOMER

    def __init__(self, container: "DependencyContainer", identity: str):
        super().__init__(container, identity)
        self.cart = Cart()
        self.location: str | None = None

    @error_handler("browse")
    async def browse(self, search: str = "") -> list[Product]:
        self._require_active()
        return await self._container.get_product_catalog_use_case().get_visible_products(search)

    @error_handler("shop_info")
    async def shop_info(self) -> ShopSettings:
        self._require_active()
        return await self._settings()

    @error_handler("add_to_cart")
    async def add_to_cart(self, product_id: str, weight_in_kg: float):
        self._require_active()
        return await self._container.get_cart_management_use_case().add_to_cart(
            self.cart, product_id, weight_in_kg
        )

    @error_handler("remove_from_cart")
    def remove_from_cart(self, product_id: str):
        self._require_active()
        return self._container.get_cart_management_use_case().remove_from_cart(
            self.cart, product_id
        )

    @error_handler("cart")
    def cart_summary(self):
        self._require_active()
        return self._container.get_cart_management_use_case().get_cart_summary(self.cart)

    @error_handler("cart_total")
    async def cart_total(self):
        """Subtotal, delivery charge and total as the checkout form shows them"""
        self._require_active()
        return await self._container.get_order_creation_use_case().get_order_preview(self.cart)

    @error_handler("capture_location")
    async def capture_location(self) -> str:
        self._require_active()
        self.location = await self._container.get_order_creation_use_case().capture_location()
        return self.location

    @error_handler("checkout")
    async def checkout(self, request: CheckoutRequest) -> Order:
        self._require_active()
        if request.location is None and self.location:
            request = dataclasses.replace(request, location=self.location)

        response = await self._container.get_order_creation_use_case().create_order(
            self.cart, request, self.identity
        )
        if not response.success:
            raise ValidationError(response.error_message, fields=response.missing_fields)

        self.location = None
        return response.order

    @error_handler("my_orders")
    async def my_orders(self) -> list[Order]:
        self._require_active()
        return await self._container.get_order_analytics_use_case().get_customer_orders(
            self.identity
        )

    @error_handler("order_confirmation_link")
    async def order_confirmation_link(self, order: Order) -> str:
        """WhatsApp chat with the shop, pre-filled with the order reference"""
        self._require_active()
        settings = await self._settings()
        return whatsapp_link(
            settings.whatsapp_support,
            invoice_service.order_confirmation_text(order, self._symbol),
            self._country_code,
        )

    @error_handler("support_link")
    async def support_link(self) -> str:
        self._require_active()
        settings = await self._settings()
        return whatsapp_link(settings.whatsapp_support, country_code=self._country_code)

    def logout(self):
        self.cart.clear()
        self.location = None
        super().logout()


class AdminSession(_BaseSession):
    """Dashboard, catalog, order handling and shop settings"""

    role = UserRole.ADMIN

    def __init__(self, container: "DependencyContainer", identity: str):
        super().__init__(container, identity)
        self._draft: ShopSettings | None = None

    # Dashboard and catalog

    @error_handler("dashboard")
    async def dashboard(self):
        self._require_active()
        return await self._container.get_order_analytics_use_case().get_dashboard_stats()

    @error_handler("products")
    async def products(self) -> list[Product]:
        self._require_active()
        return await self._container.get_product_catalog_use_case().get_all_products()

    @error_handler("toggle_product")
    async def toggle_product(self, product_id: str) -> Product | None:
        self._require_active()
        return await self._container.get_product_catalog_use_case().toggle_availability(
            product_id
        )

    @error_handler("new_product")
    def new_product(self) -> Product:
        self._require_active()
        return self._container.get_product_catalog_use_case().new_product_draft()

    @error_handler("product_image")
    async def product_image(self, product: Product, image_path) -> Product:
        self._require_active()
        return await self._container.get_product_catalog_use_case().attach_image(
            product, image_path
        )

    @error_handler("save_product")
    async def save_product(self, product: Product) -> Product:
        self._require_active()
        return await self._container.get_product_catalog_use_case().save_product(product)

    # Orders

    @error_handler("orders")
    async def orders(self, status: OrderStatus | None = None) -> list[Order]:
        self._require_active()
        if status is None:
            return await self._container.get_order_repository().get_all_orders()
        return await self._container.get_order_status_management_use_case().get_orders_by_status(
            status
        )

    @error_handler("mark_delivered")
    async def mark_delivered(self, order_id: str) -> Order:
        self._require_active()
        return await self._container.get_order_status_management_use_case().mark_delivered(
            order_id
        )

    @error_handler("update_status")
    async def update_status(self, order_id: str, status: OrderStatus | str) -> Order:
        self._require_active()
        return await self._container.get_order_status_management_use_case().update_order_status(
            order_id, status
        )

    @error_handler("adjust_bill")
    async def adjust_bill(self, order_id: str, finalize: bool = False, **changes) -> Order:
        self._require_active()
        request = BillAdjustmentRequest(order_id=order_id, changes=changes, finalize=finalize)
        return await self._container.get_order_status_management_use_case().adjust_bill(request)

    @error_handler("reopen_bill")
    async def reopen_bill(self, order_id: str) -> Order:
        self._require_active()
        return await self._container.get_order_status_management_use_case().reopen_bill(order_id)

    @error_handler("invoice")
    async def invoice(self, order_id: str, with_pdf: bool = False) -> dict:
        """Printable receipt HTML, plus PDF bytes when asked for and available"""
        self._require_active()
        order = await self._container.get_order_status_management_use_case().get_order(order_id)
        return await invoice_service.build_invoice(
            order, await self._settings(), self._symbol, with_pdf=with_pdf
        )

    @error_handler("share_receipt")
    async def share_receipt_link(self, order_id: str) -> str:
        """WhatsApp chat with the customer carrying the receipt summary"""
        self._require_active()
        order = await self._container.get_order_status_management_use_case().get_order(order_id)
        return whatsapp_link(
            order.phone,
            invoice_service.receipt_share_text(order, self._symbol),
            self._country_code,
        )

    @error_handler("dispatch_link")
    async def dispatch_link(self, order_id: str) -> str:
        self._require_active()
        order = await self._container.get_order_status_management_use_case().get_order(order_id)
        return dispatch_link(order.location, order.address)

    # Settings

    @error_handler("settings_draft")
    async def settings_draft(self) -> ShopSettings:
        """The pending settings edit, started from the committed values"""
        self._require_active()
        if self._draft is None:
            self._draft = await self._container.get_shop_settings_use_case().begin_edit()
        return self._draft

    @error_handler("update_settings")
    async def update_settings(self, **changes) -> ShopSettings:
        self._require_active()
        use_case = self._container.get_shop_settings_use_case()
        if self._draft is None:
            self._draft = await use_case.begin_edit()
        return use_case.update_draft(self._draft, **changes)

    @error_handler("settings_logo")
    async def settings_logo(self, image_path) -> ShopSettings:
        self._require_active()
        use_case = self._container.get_shop_settings_use_case()
        if self._draft is None:
            self._draft = await use_case.begin_edit()
        return await use_case.set_logo(self._draft, image_path)

    @error_handler("save_settings")
    async def save_settings(self) -> ShopSettings:
        self._require_active()
        use_case = self._container.get_shop_settings_use_case()
        if self._draft is None:
            return await use_case.get_settings()
        committed = await use_case.save(self._draft)
        self._draft = None
        return committed

    @error_handler("discard_settings")
    async def discard_settings(self) -> ShopSettings:
        self._require_active()
        self._draft = await self._container.get_shop_settings_use_case().discard()
        return self._draft

    def logout(self):
        self._draft = None
        super().logout()


Session = Union[CustomerSession, AdminSession]


def open_session(container: "DependencyContainer", login: "LoginResult") -> Session:
    """Pick the session type for a classified login"""
    session_class = AdminSession if login.role is UserRole.ADMIN else CustomerSession
    logger.info("🔑 SESSION OPENED: %s (%s)", login.identity, login.role.value)
    return session_class(container, login.identity)


@error_handler("login")
async def sign_in(container: "DependencyContainer", email: str) -> Session:
    result = await container.get_login_use_case().login_with_email(email)
    return open_session(container, result)


@error_handler("send_otp")
async def send_otp(container: "DependencyContainer", phone: str) -> bool:
    return await container.get_login_use_case().request_otp(phone)


@error_handler("verify_otp")
async def sign_in_with_phone(container: "DependencyContainer", phone: str, code: str) -> Session:
    result = await container.get_login_use_case().verify_otp(phone, code)
    return open_session(container, result)
