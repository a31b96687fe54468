"""
Money value object

Represents rupee amounts for display. Bill adjustments can drive totals below
zero, so negative amounts are valid here.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union


@dataclass(frozen=True)
class Money:
    """
    Money value object that handles currency amounts properly
    """

    amount: Decimal
    symbol: str = "₹"

    def __post_init__(self):
        """Validate money object on creation"""
        if not isinstance(self.amount, Decimal):
            # Go through str() so 0.1 stays 0.1
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

        if not self.amount.is_finite():
            raise ValueError("Money amount must be a finite number")

        rounded_amount = self.amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        object.__setattr__(self, "amount", rounded_amount)

    @classmethod
    def from_float(cls, amount: Union[int, float], symbol: str = "₹") -> "Money":
        """Create Money from float amount"""
        return cls(Decimal(str(amount)), symbol)

    @classmethod
    def zero(cls, symbol: str = "₹") -> "Money":
        """Create zero money amount"""
        return cls(Decimal("0"), symbol)

    def is_negative(self) -> bool:
        return self.amount < Decimal("0")

    def format_display(self) -> str:
        """Format for display to users, e.g. ₹260.00 or -₹50.00"""
        sign = "-" if self.is_negative() else ""
        return f"{sign}{self.symbol}{abs(self.amount):.2f}"

    def __str__(self) -> str:
        return self.format_display()


def format_currency(amount: Union[int, float], symbol: str = "₹") -> str:
    """Shortcut used by views and share texts"""
    return Money.from_float(amount, symbol).format_display()
