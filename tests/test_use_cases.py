"""
Application Use Cases Tests
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from meatshop.application.dtos.order_dtos import BillAdjustmentRequest, CheckoutRequest
from meatshop.application.use_cases import (
    CartManagementUseCase,
    LoginUseCase,
    OrderAnalyticsUseCase,
    OrderCreationUseCase,
    OrderStatusManagementUseCase,
    ProductCatalogUseCase,
    ShopSettingsUseCase,
)
from meatshop.domain.entities.cart_entity import Cart
from meatshop.domain.entities.order_entity import OrderStatus
from meatshop.domain.entities.settings_entity import UserRole
from meatshop.infrastructure.persistence.defaults import default_settings
from meatshop.infrastructure.repositories import (
    JsonOrderRepository,
    JsonProductRepository,
    JsonSettingsRepository,
)
from meatshop.infrastructure.utilities.exceptions import (
    BusinessLogicError,
    GeolocationError,
    ImageReadError,
    OrderLockedError,
    OrderNotFoundError,
    ProductNotFoundError,
    ValidationError,
)


@pytest.fixture
def product_repo(state, store):
    return JsonProductRepository(state, store)


@pytest.fixture
def order_repo(state, store):
    return JsonOrderRepository(state, store)


@pytest.fixture
def settings_repo(state, store):
    return JsonSettingsRepository(state, store)


class TestProductCatalogUseCase:
    """Test catalog browsing and maintenance"""

    @pytest.mark.asyncio
    async def test_visible_products_hide_unavailable(self, product_repo):
        use_case = ProductCatalogUseCase(product_repo)

        visible = await use_case.get_visible_products()

        assert [p.id for p in visible] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_search(self, product_repo):
        use_case = ProductCatalogUseCase(product_repo)

        assert [p.id for p in await use_case.get_visible_products("BREAST")] == ["2"]
        # Product 4 matches but is unavailable
        assert await use_case.get_visible_products("whole") == []

    @pytest.mark.asyncio
    async def test_toggle_availability_persists(self, product_repo, store):
        use_case = ProductCatalogUseCase(product_repo)

        product = await use_case.toggle_availability("4")

        assert product.available is True
        assert store.load().products[3].available is True

    @pytest.mark.asyncio
    async def test_toggle_unknown_product_is_noop(self, product_repo, store):
        use_case = ProductCatalogUseCase(product_repo)

        assert await use_case.toggle_availability("missing") is None
        assert not store.path.exists()

    @pytest.mark.asyncio
    async def test_save_new_product_prepends(self, product_repo):
        use_case = ProductCatalogUseCase(product_repo)
        draft = use_case.new_product_draft()
        draft.name = "Mutton Keema"
        draft.price_per_kg = 800.0

        await use_case.save_product(draft)

        products = await use_case.get_all_products()
        assert products[0].name == "Mutton Keema"
        assert len(products) == 5

    @pytest.mark.asyncio
    async def test_save_invalid_product(self, product_repo):
        use_case = ProductCatalogUseCase(product_repo)

        with pytest.raises(ValidationError):
            await use_case.save_product(use_case.new_product_draft())

    @pytest.mark.asyncio
    async def test_save_product_reads_price_text(self, product_repo, store):
        use_case = ProductCatalogUseCase(product_repo)
        product = await product_repo.find_by_id("2")
        product.price_per_kg = "480"

        await use_case.save_product(product)

        assert store.load().products[1].price_per_kg == 480.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["abc", float("nan"), float("inf")])
    async def test_save_product_rejects_unusable_price(self, product_repo, store, price):
        use_case = ProductCatalogUseCase(product_repo)
        product = await product_repo.find_by_id("2")
        product.price_per_kg = price

        with pytest.raises(ValidationError) as exc_info:
            await use_case.save_product(product)

        assert exc_info.value.field == "product"
        assert (await product_repo.find_by_id("2")).price_per_kg == 450.0
        assert not store.path.exists()

    @pytest.mark.asyncio
    async def test_attach_image(self, product_repo, tmp_path):
        image = tmp_path / "chicken.png"
        image.write_bytes(b"\x89PNG")
        use_case = ProductCatalogUseCase(product_repo)
        draft = use_case.new_product_draft()

        await use_case.attach_image(draft, image)

        assert draft.image == "data:image/png;base64,iVBORw=="

    @pytest.mark.asyncio
    async def test_attach_missing_image_keeps_product(self, product_repo, tmp_path):
        use_case = ProductCatalogUseCase(product_repo)
        draft = use_case.new_product_draft()
        original = draft.image

        with pytest.raises(ImageReadError):
            await use_case.attach_image(draft, tmp_path / "missing.jpg")
        assert draft.image == original


class TestCartManagementUseCase:
    """Test cart operations"""

    @pytest.mark.asyncio
    async def test_add_to_cart(self, product_repo, cart):
        use_case = CartManagementUseCase(product_repo)

        await use_case.add_to_cart(cart, "1", 0.5)
        summary = await use_case.add_to_cart(cart, "1", 1.0)

        assert len(summary.lines) == 1
        assert summary.lines[0].quantity_in_kg == 1.5
        assert summary.subtotal == 330.0

    @pytest.mark.asyncio
    async def test_add_unavailable_product(self, product_repo, cart):
        use_case = CartManagementUseCase(product_repo)

        with pytest.raises(ProductNotFoundError):
            await use_case.add_to_cart(cart, "4", 1.0)
        with pytest.raises(ProductNotFoundError):
            await use_case.add_to_cart(cart, "nope", 1.0)
        assert cart.is_empty()

    @pytest.mark.asyncio
    async def test_add_invalid_weight(self, product_repo, cart):
        use_case = CartManagementUseCase(product_repo)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.add_to_cart(cart, "1", 0)
        assert exc_info.value.field == "weight"

    @pytest.mark.asyncio
    async def test_add_weight_as_text(self, product_repo, cart):
        use_case = CartManagementUseCase(product_repo)

        summary = await use_case.add_to_cart(cart, "1", "1.5")

        assert summary.lines[0].quantity_in_kg == 1.5
        assert summary.subtotal == 330.0

        for weight in ("abc", float("nan"), float("-inf")):
            with pytest.raises(ValidationError):
                await use_case.add_to_cart(cart, "1", weight)
        assert cart.items[0].quantity_in_kg == 1.5

    @pytest.mark.asyncio
    async def test_remove_from_cart(self, product_repo, cart):
        use_case = CartManagementUseCase(product_repo)
        await use_case.add_to_cart(cart, "1", 1.0)

        summary = use_case.remove_from_cart(cart, "1")

        assert summary.is_empty
        assert summary.subtotal == 0


class TestOrderCreationUseCase:
    """Test checkout"""

    @pytest.mark.asyncio
    async def test_checkout_success(self, product_repo, order_repo, settings_repo, store, cart, checkout_request):
        await CartManagementUseCase(product_repo).add_to_cart(cart, "1", 1.0)
        use_case = OrderCreationUseCase(order_repo, settings_repo)

        response = await use_case.create_order(cart, checkout_request, "ravi@example.com")

        assert response.success is True
        order = response.order
        assert order.subtotal == 220.0
        assert order.delivery_charge == 40.0
        assert order.total == 260.0
        assert order.status == OrderStatus.PENDING
        assert order.customer_email == "ravi@example.com"
        assert cart.is_empty()

        orders = await order_repo.get_all_orders()
        assert orders[0].id == order.id
        assert len(orders) == 2
        assert store.load().orders[0].id == order.id

    @pytest.mark.asyncio
    async def test_checkout_without_delivery(self, product_repo, order_repo, settings_repo, state, cart, checkout_request):
        state.settings.is_delivery_enabled = False
        await CartManagementUseCase(product_repo).add_to_cart(cart, "2", 0.5)
        use_case = OrderCreationUseCase(order_repo, settings_repo)

        response = await use_case.create_order(cart, checkout_request, "a@b.c")

        assert response.order.delivery_charge == 0
        assert response.order.total == 225.0

    @pytest.mark.asyncio
    async def test_checkout_missing_fields(self, product_repo, order_repo, settings_repo, cart):
        await CartManagementUseCase(product_repo).add_to_cart(cart, "1", 1.0)
        use_case = OrderCreationUseCase(order_repo, settings_repo)
        request = CheckoutRequest(customer_name="Ravi", phone="", address="  ")

        response = await use_case.create_order(cart, request, "a@b.c")

        assert response.success is False
        assert response.error_message == "Please fill in all delivery details."
        assert response.missing_fields == ["phone", "address"]
        assert len(cart) == 1
        assert len(await order_repo.get_all_orders()) == 1

    @pytest.mark.asyncio
    async def test_checkout_empty_cart(self, order_repo, settings_repo, cart, checkout_request):
        use_case = OrderCreationUseCase(order_repo, settings_repo)

        response = await use_case.create_order(cart, checkout_request, "a@b.c")

        assert response.success is False
        assert response.missing_fields == ["items"]
        assert len(await order_repo.get_all_orders()) == 1

    @pytest.mark.asyncio
    async def test_checkout_bad_payment_method(self, product_repo, order_repo, settings_repo, cart, checkout_request):
        await CartManagementUseCase(product_repo).add_to_cart(cart, "1", 1.0)
        checkout_request.payment_method = "CARD"
        use_case = OrderCreationUseCase(order_repo, settings_repo)

        response = await use_case.create_order(cart, checkout_request, "a@b.c")

        assert response.success is False
        assert response.missing_fields == ["payment_method"]

    @pytest.mark.asyncio
    async def test_order_ids_do_not_collide(self, product_repo, order_repo, settings_repo, cart, checkout_request):
        use_case = OrderCreationUseCase(order_repo, settings_repo)
        ids = set()
        for _ in range(5):
            await CartManagementUseCase(product_repo).add_to_cart(cart, "3", 1.0)
            response = await use_case.create_order(cart, checkout_request, "a@b.c")
            ids.add(response.order.id)

        assert len(ids) == 5
        assert "ORD-12345" not in ids

    @pytest.mark.asyncio
    async def test_preview(self, product_repo, order_repo, settings_repo, cart):
        await CartManagementUseCase(product_repo).add_to_cart(cart, "1", 1.0)
        use_case = OrderCreationUseCase(order_repo, settings_repo)

        preview = await use_case.get_order_preview(cart)

        assert (preview.subtotal, preview.delivery_charge, preview.total) == (220.0, 40.0, 260.0)

    @pytest.mark.asyncio
    async def test_capture_location_delegates(self, order_repo, settings_repo):
        geolocation = MagicMock()
        geolocation.locate = AsyncMock(return_value="https://www.google.com/maps?q=1,2")
        use_case = OrderCreationUseCase(order_repo, settings_repo, geolocation)

        assert await use_case.capture_location() == "https://www.google.com/maps?q=1,2"

    @pytest.mark.asyncio
    async def test_capture_location_unsupported(self, order_repo, settings_repo):
        use_case = OrderCreationUseCase(order_repo, settings_repo)

        with pytest.raises(GeolocationError) as exc_info:
            await use_case.capture_location()
        assert exc_info.value.reason == GeolocationError.UNSUPPORTED


class TestOrderStatusManagementUseCase:
    """Test status transitions and bill adjustment"""

    @pytest.mark.asyncio
    async def test_mark_delivered(self, order_repo, store):
        use_case = OrderStatusManagementUseCase(order_repo)

        order = await use_case.mark_delivered("ORD-12345")

        assert order.status == OrderStatus.DELIVERED
        assert store.load().orders[0].status == OrderStatus.DELIVERED

    @pytest.mark.asyncio
    async def test_invalid_transition(self, order_repo):
        use_case = OrderStatusManagementUseCase(order_repo)
        await use_case.mark_delivered("ORD-12345")

        with pytest.raises(BusinessLogicError):
            await use_case.update_order_status("ORD-12345", OrderStatus.PENDING)
        with pytest.raises(BusinessLogicError):
            await use_case.update_order_status("ORD-12345", OrderStatus.DELIVERED)

    @pytest.mark.asyncio
    async def test_unknown_order(self, order_repo):
        use_case = OrderStatusManagementUseCase(order_repo)

        with pytest.raises(OrderNotFoundError):
            await use_case.mark_delivered("ORD-NOPE")

    @pytest.mark.asyncio
    async def test_adjust_bill_discount(self, order_repo, store):
        use_case = OrderStatusManagementUseCase(order_repo)

        order = await use_case.adjust_bill(BillAdjustmentRequest("ORD-12345", {"discount": 50}))

        assert order.total == 210.0
        assert store.load().orders[0].total == 210.0

    @pytest.mark.asyncio
    async def test_finalize_locks_bill(self, order_repo):
        use_case = OrderStatusManagementUseCase(order_repo)
        await use_case.adjust_bill(
            BillAdjustmentRequest("ORD-12345", {"tax": 13}, finalize=True)
        )

        with pytest.raises(OrderLockedError):
            await use_case.adjust_bill(BillAdjustmentRequest("ORD-12345", {"discount": 5}))

        order = await use_case.reopen_bill("ORD-12345")
        assert order.is_finalized is False
        order = await use_case.adjust_bill(BillAdjustmentRequest("ORD-12345", {"discount": 5}))
        assert order.total == 268.0

    @pytest.mark.asyncio
    async def test_lock_does_not_block_status(self, order_repo):
        use_case = OrderStatusManagementUseCase(order_repo)
        await use_case.adjust_bill(BillAdjustmentRequest("ORD-12345", finalize=True))

        order = await use_case.mark_delivered("ORD-12345")

        assert order.status == OrderStatus.DELIVERED
        assert order.is_finalized is True

    @pytest.mark.asyncio
    async def test_adjust_unknown_field(self, order_repo):
        use_case = OrderStatusManagementUseCase(order_repo)

        with pytest.raises(ValidationError):
            await use_case.adjust_bill(BillAdjustmentRequest("ORD-12345", {"total": 0}))

    @pytest.mark.asyncio
    async def test_orders_by_status(self, order_repo):
        use_case = OrderStatusManagementUseCase(order_repo)

        assert len(await use_case.get_pending_orders()) == 1
        assert await use_case.get_orders_by_status(OrderStatus.DELIVERED) == []


class TestOrderAnalyticsUseCase:
    """Test dashboard numbers"""

    @pytest.mark.asyncio
    async def test_dashboard(self, order_repo):
        use_case = OrderAnalyticsUseCase(order_repo)

        stats = await use_case.get_dashboard_stats()

        assert stats.gross_sales == 260.0
        assert stats.pending_count == 1
        assert stats.order_count == 1

    @pytest.mark.asyncio
    async def test_dashboard_counts_all_orders(self):
        pending = MagicMock(total=100.0, status=OrderStatus.PENDING)
        delivered = MagicMock(total=-20.0, status=OrderStatus.DELIVERED)
        repo = MagicMock()
        repo.get_all_orders = AsyncMock(return_value=[pending, delivered])

        stats = await OrderAnalyticsUseCase(repo).get_dashboard_stats()

        assert stats.gross_sales == 80.0
        assert stats.pending_count == 1

    @pytest.mark.asyncio
    async def test_customer_orders(self, order_repo):
        use_case = OrderAnalyticsUseCase(order_repo)

        assert len(await use_case.get_customer_orders("arun@example.com")) == 1
        assert await use_case.get_customer_orders("someone@else.com") == []


class TestShopSettingsUseCase:
    """Test the settings draft and commit flow"""

    @pytest.mark.asyncio
    async def test_draft_is_not_committed_until_saved(self, settings_repo, store):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()

        use_case.update_draft(draft, shop_name="Fresh Cuts", default_delivery_charge=0)

        assert (await use_case.get_settings()).shop_name == "Shate Bhai CMC"
        assert not store.path.exists()

        await use_case.save(draft)

        assert (await use_case.get_settings()).shop_name == "Fresh Cuts"
        assert store.load().settings.default_delivery_charge == 0

    @pytest.mark.asyncio
    async def test_saved_settings_are_detached_from_draft(self, settings_repo):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()
        await use_case.save(draft)

        draft.shop_name = "Edited After Save"

        assert (await use_case.get_settings()).shop_name == "Shate Bhai CMC"

    @pytest.mark.asyncio
    async def test_discard_resets_to_committed(self, settings_repo):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()
        use_case.update_draft(draft, is_open=False)

        draft = await use_case.discard()

        assert draft.is_open is True

    @pytest.mark.asyncio
    async def test_rejects_unknown_field(self, settings_repo):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()

        with pytest.raises(ValidationError):
            use_case.update_draft(draft, theme="dark")

    @pytest.mark.asyncio
    async def test_rejects_negative_delivery_charge(self, settings_repo, store):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()
        use_case.update_draft(draft, default_delivery_charge=-5)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.save(draft)
        assert exc_info.value.field == "default_delivery_charge"
        assert not store.path.exists()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"is_delivery_enabled": "false"}, "is_delivery_enabled"),
            ({"is_open": 0}, "is_open"),
            ({"admin_emails": ["boss@shop.com"]}, "admin_emails"),
            ({"default_delivery_charge": float("nan")}, "default_delivery_charge"),
        ],
    )
    async def test_rejects_mistyped_fields(self, settings_repo, store, changes, field):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()
        use_case.update_draft(draft, **changes)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.save(draft)

        assert exc_info.value.field == field
        assert (await use_case.get_settings()) == default_settings()
        assert not store.path.exists()

    @pytest.mark.asyncio
    async def test_delivery_charge_text_is_read_as_number(self, settings_repo, store):
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()
        use_case.update_draft(draft, default_delivery_charge="25")

        saved = await use_case.save(draft)

        assert saved.default_delivery_charge == 25.0
        assert store.load().settings.default_delivery_charge == 25.0

    @pytest.mark.asyncio
    async def test_set_logo(self, settings_repo, tmp_path):
        logo = tmp_path / "logo.jpg"
        logo.write_bytes(b"jpeg")
        use_case = ShopSettingsUseCase(settings_repo)
        draft = await use_case.begin_edit()

        await use_case.set_logo(draft, logo)

        assert draft.logo.startswith("data:image/jpeg;base64,")


class TestLoginUseCase:
    """Test simulated sign-in"""

    @pytest.mark.asyncio
    async def test_admin_email(self, settings_repo):
        use_case = LoginUseCase(settings_repo, otp_delay_seconds=0)

        result = await use_case.login_with_email("  MDRIFAS7777@gmail.com ")

        assert result.role is UserRole.ADMIN
        assert result.identity == "MDRIFAS7777@gmail.com"

    @pytest.mark.asyncio
    async def test_customer_email(self, settings_repo):
        use_case = LoginUseCase(settings_repo, otp_delay_seconds=0)

        result = await use_case.login_with_email("ravi@example.com")

        assert result.role is UserRole.CUSTOMER

    @pytest.mark.asyncio
    async def test_blank_email(self, settings_repo):
        with pytest.raises(ValidationError):
            await LoginUseCase(settings_repo).login_with_email("   ")

    @pytest.mark.asyncio
    async def test_otp_waits_for_simulated_send(self, settings_repo):
        use_case = LoginUseCase(settings_repo, otp_delay_seconds=1.0)

        with patch(
            "meatshop.application.use_cases.login_use_case.asyncio.sleep", new_callable=AsyncMock
        ) as mock_sleep:
            assert await use_case.request_otp("9876543210") is True
        mock_sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    async def test_any_code_is_accepted(self, settings_repo):
        use_case = LoginUseCase(settings_repo, otp_delay_seconds=0)

        result = await use_case.verify_otp("9876543210", "0000")

        assert result.identity == "9876543210"
        assert result.role is UserRole.CUSTOMER

    @pytest.mark.asyncio
    async def test_empty_code_is_rejected(self, settings_repo):
        with pytest.raises(ValidationError):
            await LoginUseCase(settings_repo).verify_otp("9876543210", "")

    @pytest.mark.asyncio
    async def test_classification_follows_saved_settings(self, settings_repo):
        settings = default_settings()
        settings.admin_emails = "owner@shop.in"
        await settings_repo.replace(settings)

        result = await LoginUseCase(settings_repo).login_with_email("owner@shop.in")

        assert result.role is UserRole.ADMIN
