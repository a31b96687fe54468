"""
Application constants for the meat shop storefront

Centralizes magic numbers and hard-coded strings.
"""

from typing import Final


class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    ERROR_LOG_BACKUP_COUNT: Final[int] = 10


class FileSettings:
    """File names"""

    MAIN_LOG_FILE: Final[str] = "meatshop.log"
    ERROR_LOG_FILE: Final[str] = "meatshop_errors.log"


class CartSettings:
    """Weight increments offered on the storefront"""

    WEIGHT_OPTIONS_KG: Final[tuple[float, ...]] = (0.5, 1.0)


class OrderSettings:
    """Order identifiers"""

    ORDER_ID_PREFIX: Final[str] = "ORD-"
    ORDER_ID_LENGTH: Final[int] = 6
    ORDER_REF_LENGTH: Final[int] = 6
    MAX_ID_ATTEMPTS: Final[int] = 20


class LinkSettings:
    """Outbound deep-link bases"""

    WHATSAPP_BASE_URL: Final[str] = "https://wa.me/"
    MAPS_BASE_URL: Final[str] = "https://www.google.com/maps"
    LOCAL_NUMBER_LENGTH: Final[int] = 10
    LOCAL_MOBILE_FIRST_DIGITS: Final[str] = "6789"


class CatalogSettings:
    """Defaults for new catalog entries"""

    PRODUCT_ID_PREFIX: Final[str] = "prod_"
    DEFAULT_CATEGORY: Final[str] = "Chicken"
    PLACEHOLDER_IMAGE: Final[str] = "https://picsum.photos/seed/chicken/400/300"
