"""
Shop Settings Entity - shop identity, toggles and contact details
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


@dataclass
class ShopSettings:
    """Singleton shop configuration edited from the admin settings screen"""

    shop_name: str
    logo: str
    is_open: bool = True
    is_delivery_enabled: bool = True
    whatsapp_support: str = ""
    support_email: str = ""
    upi_id: str = ""
    default_delivery_charge: float = 0.0
    admin_emails: str = ""  # comma separated

    def admin_email_list(self) -> list[str]:
        return [
            email.strip().lower()
            for email in (self.admin_emails or "").split(",")
            if email.strip()
        ]

    def classify(self, identifier: str) -> UserRole:
        """
        Role for a login identifier.

        This only sorts users into views. Nothing is verified.
        """
        if (identifier or "").strip().lower() in self.admin_email_list():
            return UserRole.ADMIN
        return UserRole.CUSTOMER

    def is_admin(self, identifier: str) -> bool:
        return self.classify(identifier) is UserRole.ADMIN

    def delivery_charge(self) -> float:
        """Charge applied at checkout"""
        return self.default_delivery_charge if self.is_delivery_enabled else 0.0

    def copy(self) -> "ShopSettings":
        return dataclasses.replace(self)
