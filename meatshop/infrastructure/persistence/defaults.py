"""
Seed data used when local storage is empty or unreadable
"""

from datetime import datetime, timezone

from meatshop.domain.entities.cart_entity import CartItem
from meatshop.domain.entities.order_entity import Order, OrderStatus, PaymentMethod
from meatshop.domain.entities.product_entity import Product
from meatshop.domain.entities.settings_entity import ShopSettings


def default_settings() -> ShopSettings:
    return ShopSettings(
        shop_name="Shate Bhai CMC",
        logo="https://picsum.photos/seed/meatshop/200/200",
        is_open=True,
        is_delivery_enabled=True,
        whatsapp_support="919876543210",
        support_email="mdrifas7777@gmail.com",
        upi_id="shatebhai@upi",
        default_delivery_charge=40.0,
        admin_emails="mdrifas7777@gmail.com",
    )


def default_products() -> list[Product]:
    return [
        Product(
            id="1",
            name="Farm Fresh Chicken (Curry Cut)",
            description=(
                "Fresh farm-raised chicken, cleaned and cut into convenient pieces "
                "perfect for curries."
            ),
            price_per_kg=220.0,
            image="https://picsum.photos/seed/chicken1/400/300",
            available=True,
            category="Chicken",
        ),
        Product(
            id="2",
            name="Chicken Breast (Boneless)",
            description=(
                "High-protein, lean boneless chicken breast cuts. Ideal for grilling "
                "and healthy meals."
            ),
            price_per_kg=450.0,
            image="https://picsum.photos/seed/chicken2/400/300",
            available=True,
            category="Chicken",
        ),
        Product(
            id="3",
            name="Chicken Drumsticks",
            description="Succulent and tender chicken drumsticks. Perfect for tandoori or deep frying.",
            price_per_kg=380.0,
            image="https://picsum.photos/seed/chicken3/400/300",
            available=True,
            category="Chicken",
        ),
        Product(
            id="4",
            name="Whole Chicken (With Skin)",
            description="Full whole chicken with skin on, perfect for roasting whole.",
            price_per_kg=200.0,
            image="https://picsum.photos/seed/chicken4/400/300",
            available=False,
            category="Chicken",
        ),
    ]


def sample_orders() -> list[Order]:
    return [
        Order(
            id="ORD-12345",
            customer_name="Arun Kumar",
            customer_email="arun@example.com",
            phone="9840012345",
            address="12, Gandhi St, Thiruvallur, Chennai",
            items=[CartItem("1", "Farm Fresh Chicken", 1.0, 220.0)],
            subtotal=220.0,
            delivery_charge=40.0,
            discount=0.0,
            tax=0.0,
            total=260.0,
            status=OrderStatus.PENDING,
            payment_method=PaymentMethod.COD,
            timestamp=datetime.now(timezone.utc).isoformat(),
            is_finalized=False,
        )
    ]
