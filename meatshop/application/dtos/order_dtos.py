"""
Order DTOs

Data Transfer Objects for order-related operations.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from meatshop.domain.entities.order_entity import DeliveryDetails, Order, PaymentMethod


@dataclass
class CheckoutRequest:
    """Checkout form as submitted by the customer"""

    customer_name: str
    phone: str
    address: str
    payment_method: PaymentMethod | str = PaymentMethod.COD
    location: Optional[str] = None

    def to_details(self) -> DeliveryDetails:
        return DeliveryDetails(
            customer_name=self.customer_name or "",
            phone=self.phone or "",
            address=self.address or "",
            payment_method=PaymentMethod(self.payment_method),
            location=self.location,
        )


@dataclass
class OrderPreview:
    """Totals shown on the checkout form before placing the order"""

    subtotal: float
    delivery_charge: float
    total: float


@dataclass
class OrderCreationResponse:
    """Response from order creation"""

    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None
    missing_fields: List[str] = field(default_factory=list)


@dataclass
class BillAdjustmentRequest:
    """Admin edit of an order's bill"""

    order_id: str
    changes: Dict[str, Any] = field(default_factory=dict)
    finalize: bool = False


@dataclass
class DashboardStats:
    """Numbers on the admin dashboard"""

    gross_sales: float
    pending_count: int
    order_count: int
