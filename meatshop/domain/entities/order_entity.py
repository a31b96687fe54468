# pylint: disable=too-many-instance-attributes
"""
Order Entity - checkout arithmetic, status transitions and bill adjustment
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

from meatshop.domain.entities.cart_entity import Cart, CartItem
from meatshop.domain.entities.settings_entity import ShopSettings
from meatshop.domain.value_objects.order_id import short_ref


class OrderStatus(str, Enum):
    """Order status. Nothing currently moves an order to CANCELLED."""

    PENDING = "Pending"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class PaymentMethod(str, Enum):
    """Payment label chosen at checkout; no payment is processed"""

    COD = "COD"
    UPI = "UPI"


@dataclass
class DeliveryDetails:
    """What the customer fills in on the checkout form"""

    customer_name: str
    phone: str
    address: str
    payment_method: PaymentMethod = PaymentMethod.COD
    location: str | None = None

    def missing_fields(self) -> list[str]:
        return [
            name
            for name in ("customer_name", "phone", "address")
            if not (getattr(self, name) or "").strip()
        ]


def _coerce_amount(value) -> float:
    """Blank or unreadable bill inputs count as zero"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return amount if math.isfinite(amount) else 0.0


@dataclass
class Order:
    """Order domain entity"""

    id: str
    customer_name: str
    customer_email: str
    phone: str
    address: str
    items: list[CartItem] = field(default_factory=list)
    subtotal: float = 0.0
    delivery_charge: float = 0.0
    discount: float = 0.0
    tax: float = 0.0
    total: float = 0.0
    status: OrderStatus = OrderStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.COD
    timestamp: str = ""
    is_finalized: bool = False
    location: str | None = None

    BILL_FIELDS: ClassVar[tuple[str, ...]] = ("subtotal", "delivery_charge", "tax", "discount")

    # Valid status transitions
    STATUS_TRANSITIONS: ClassVar[dict[OrderStatus, tuple[OrderStatus, ...]]] = {
        OrderStatus.PENDING: (OrderStatus.DELIVERED,),
        OrderStatus.DELIVERED: (),  # Terminal state
        OrderStatus.CANCELLED: (),  # Terminal state
    }

    @classmethod
    def place(
        cls,
        order_id: str,
        cart: Cart,
        details: DeliveryDetails,
        settings: ShopSettings,
        customer_email: str,
        placed_at: datetime | None = None,
    ) -> "Order":
        """Build a new pending order from the cart at checkout"""
        subtotal = cart.subtotal()
        delivery_charge = settings.delivery_charge()
        placed_at = placed_at or datetime.now(timezone.utc)
        return cls(
            id=order_id,
            customer_name=details.customer_name.strip(),
            customer_email=customer_email,
            phone=details.phone.strip(),
            address=details.address.strip(),
            location=details.location or None,
            items=[
                CartItem(item.product_id, item.name, item.quantity_in_kg, item.price)
                for item in cart.items
            ],
            subtotal=subtotal,
            delivery_charge=delivery_charge,
            discount=0.0,
            tax=0.0,
            total=subtotal + delivery_charge,
            status=OrderStatus.PENDING,
            payment_method=PaymentMethod(details.payment_method),
            timestamp=placed_at.isoformat(),
            is_finalized=False,
        )

    @property
    def short_ref(self) -> str:
        return short_ref(self.id)

    def calculate_total(self) -> float:
        return self.subtotal + self.delivery_charge + self.tax - self.discount

    def recompute_total(self) -> float:
        self.total = self.calculate_total()
        return self.total

    def adjust_bill(self, **changes) -> float:
        """
        Overwrite bill fields, recomputing the total after each one.

        Only subtotal, delivery_charge, tax and discount are editable. Negative
        results are kept as they are.
        """
        if self.is_finalized:
            raise ValueError(f"Order {self.id} is finalized")

        unknown = set(changes) - set(self.BILL_FIELDS)
        if unknown:
            raise ValueError(f"Not a bill field: {', '.join(sorted(unknown))}")

        for name in self.BILL_FIELDS:
            if name in changes:
                setattr(self, name, _coerce_amount(changes[name]))
                self.recompute_total()
        return self.total

    def finalize(self):
        """Lock the bill against further adjustments"""
        self.is_finalized = True

    def reopen(self):
        self.is_finalized = False

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        return new_status in self.STATUS_TRANSITIONS.get(self.status, ())

    def transition_to(self, new_status: OrderStatus):
        new_status = OrderStatus(new_status)
        if not self.can_transition_to(new_status):
            raise ValueError(
                f"Invalid status transition: {self.status.value} → {new_status.value}"
            )
        self.status = new_status
