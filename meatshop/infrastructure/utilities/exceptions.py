"""
Custom exceptions and error handling for the meat shop storefront
"""

import functools
import inspect
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


class ShopError(Exception):
    """Base exception for the storefront"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "An error occurred. Please try again."
        self.error_code = error_code or "GENERAL_ERROR"


class ValidationError(ShopError):
    """Input validation errors"""

    def __init__(self, message: str, field: str = None, fields: list[str] = None):
        super().__init__(
            message, message, "VALIDATION_ERROR"  # Validation errors are user-friendly
        )
        self.fields = list(fields or ([field] if field else []))
        self.field = field or (self.fields[0] if self.fields else None)


class BusinessLogicError(ShopError):
    """Business rule violations"""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message, user_message or message, "BUSINESS_ERROR")


class CartEmptyError(ValidationError):
    """Cart is empty when operation requires items"""

    def __init__(self):
        super().__init__("Your cart is empty. Please add some items first.", "items")


class ProductNotFoundError(BusinessLogicError):
    """Product not found"""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            "Sorry, this item is not available right now.",
        )
        self.product_id = product_id


class OrderNotFoundError(BusinessLogicError):
    """Order not found"""

    def __init__(self, order_id: str):
        super().__init__(f"Order not found: {order_id}", f"Order #{order_id} not found.")
        self.order_id = order_id


class OrderLockedError(BusinessLogicError):
    """Bill edit attempted on a finalized order"""

    def __init__(self, order_id: str):
        super().__init__(
            f"Order {order_id} is finalized",
            "This bill is finalized. Reopen it before making adjustments.",
        )
        self.order_id = order_id


class CapabilityError(ShopError):
    """A device capability (location, file access) failed"""

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message, user_message or message, "CAPABILITY_ERROR")


class GeolocationError(CapabilityError):
    """Location capture failed"""

    UNSUPPORTED = "unsupported"
    PERMISSION_DENIED = "permission_denied"
    TIMEOUT = "timeout"
    UNAVAILABLE = "unavailable"

    _MESSAGES = {
        UNSUPPORTED: "Location services are not supported on this device.",
        PERMISSION_DENIED: "Unable to detect location. Please enable GPS permissions.",
        TIMEOUT: "Location request timed out. Please try again.",
        UNAVAILABLE: "Unable to detect location. Please try again.",
    }

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(
            f"Geolocation failed ({reason}) {detail}".strip(),
            self._MESSAGES.get(reason, self._MESSAGES[self.UNAVAILABLE]),
        )
        self.reason = reason


class ImageReadError(CapabilityError):
    """Image file could not be read"""

    def __init__(self, path: str, detail: str = ""):
        super().__init__(f"Image read failed for {path}: {detail}", "Image load failed.")
        self.path = path


class PersistenceError(ShopError):
    """Store snapshot could not be written"""

    def __init__(self, message: str):
        super().__init__(
            message,
            "Sorry, your changes could not be saved. Please try again.",
            "PERSISTENCE_ERROR",
        )


@dataclass
class ActionResult:
    """Outcome of a user action; failed results carry the alert text"""

    success: bool
    value: Any = None
    message: str | None = None
    error_code: str | None = None


def _failure(error: ShopError, operation: str) -> ActionResult:
    logger.warning(
        "Action %s failed: %s",
        operation,
        error,
        extra={"operation": operation, "error_code": error.error_code},
    )
    return ActionResult(
        success=False, message=error.user_message, error_code=error.error_code
    )


def error_handler(operation: str = "unknown"):
    """
    Decorator for user actions.

    Wraps the return value in an ActionResult and turns ShopError into a
    failed result carrying the user message. Anything else propagates.
    """

    def decorator(func):
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return ActionResult(success=True, value=await func(*args, **kwargs))
                except ShopError as e:
                    return _failure(e, operation)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return ActionResult(success=True, value=func(*args, **kwargs))
            except ShopError as e:
                return _failure(e, operation)

        return wrapper

    return decorator
