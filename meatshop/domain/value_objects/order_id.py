"""Order ID value object"""

import re
import secrets
import string
from dataclasses import dataclass
from typing import ClassVar, Container

from meatshop.infrastructure.utilities.constants import OrderSettings


@dataclass(frozen=True)
class OrderId:
    """Short random order identifier such as ORD-7K2QX9"""

    value: str

    ALPHABET: ClassVar[str] = string.ascii_uppercase + string.digits
    PATTERN: ClassVar[str] = r"^ORD-[A-Z0-9]+$"

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Order ID cannot be empty")
        if not re.match(self.PATTERN, self.value):
            raise ValueError(f"Invalid order ID: {self.value}")

    @classmethod
    def generate(cls, taken: Container[str] = ()) -> "OrderId":
        """Draw a fresh id, redrawing while it collides with an id in ``taken``"""
        for _ in range(OrderSettings.MAX_ID_ATTEMPTS):
            token = "".join(
                secrets.choice(cls.ALPHABET) for _ in range(OrderSettings.ORDER_ID_LENGTH)
            )
            candidate = f"{OrderSettings.ORDER_ID_PREFIX}{token}"
            if candidate not in taken:
                return cls(candidate)
        raise RuntimeError("Could not allocate a unique order ID")

    @property
    def short_ref(self) -> str:
        """Reference shown to customers: the last six characters"""
        return short_ref(self.value)

    def __str__(self) -> str:
        return self.value


def short_ref(order_id: str) -> str:
    return order_id[-OrderSettings.ORDER_REF_LENGTH:]
