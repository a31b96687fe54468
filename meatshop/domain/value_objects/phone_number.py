"""
Phone Number value object

Represents a phone number as typed by a customer or configured by the shop.
"""

import re
from dataclasses import dataclass

from meatshop.infrastructure.utilities.constants import LinkSettings


@dataclass(frozen=True)
class PhoneNumber:
    """
    Phone number value object.

    The raw text is kept as typed; only the digits matter for deep links.
    """

    value: str

    def __post_init__(self):
        """Validate phone number on creation"""
        if not self.value or not self.value.strip():
            raise ValueError("Phone number cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    @property
    def digits(self) -> str:
        """All digits, separators and '+' removed"""
        return re.sub(r"\D", "", self.value)

    def is_local_mobile(self) -> bool:
        """Ten digits starting 6-9: an Indian mobile number without country code"""
        digits = self.digits
        return (
            len(digits) == LinkSettings.LOCAL_NUMBER_LENGTH
            and digits[0] in LinkSettings.LOCAL_MOBILE_FIRST_DIGITS
        )

    def international_digits(self, country_code: str = "91") -> str:
        """Digits with the country code added to local mobiles; others pass through"""
        if self.is_local_mobile():
            return f"{country_code}{self.digits}"
        return self.digits

    def __str__(self) -> str:
        return self.value
