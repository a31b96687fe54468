"""
Outbound deep links: WhatsApp chats and map pins
"""

from urllib.parse import quote

from meatshop.domain.value_objects.phone_number import PhoneNumber
from meatshop.infrastructure.utilities.constants import LinkSettings

# Characters encodeURIComponent leaves alone besides alphanumerics and _.-~
URI_COMPONENT_SAFE = "!*'()"


def whatsapp_link(phone: str, text: str | None = None, country_code: str = "91") -> str:
    """
    Chat link for a phone number.

    Ten-digit local mobiles get the country code; any other format is used as
    its bare digits. A blank number gives the bare chat base.
    """
    digits = PhoneNumber(phone).international_digits(country_code) if (phone or "").strip() else ""
    link = f"{LinkSettings.WHATSAPP_BASE_URL}{digits}"
    if text:
        link += f"?text={quote(text, safe=URI_COMPONENT_SAFE)}"
    return link


def coordinates_link(latitude: float, longitude: float) -> str:
    return f"{LinkSettings.MAPS_BASE_URL}?q={latitude},{longitude}"


def address_link(address: str) -> str:
    return f"{LinkSettings.MAPS_BASE_URL}?q={quote(address, safe=URI_COMPONENT_SAFE)}"


def dispatch_link(location: str | None, address: str) -> str:
    """Where the driver should go: the captured pin if any, else the typed address"""
    return location or address_link(address)
