"""Error Hierarchy — typed, categorized exceptions for all storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; collaborator errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    product_id: str | None = None
    attribute: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "product_id": self.context.product_id,
                    "attribute": self.context.attribute,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(StorefrontError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ProductNotFoundError(ResourceNotFoundError):
    """Catalog lookup of an unknown product id."""
    def __init__(self, product_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__("Product", product_id, ctx)
        self.code = "PRODUCT_NOT_FOUND"
        self.product_id = product_id


class UnknownAttributeError(StorefrontError):
    """Configurator call on an attribute that is not part of the spec."""
    def __init__(self, attribute: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.attribute = attribute
        super().__init__(
            f"Unknown attribute '{attribute}'",
            "UNKNOWN_ATTRIBUTE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.attribute = attribute


class OptionIndexError(StorefrontError):
    """Explicit option index outside the attribute's option list."""
    def __init__(
        self, attribute: str, index: int, size: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.attribute = attribute
        super().__init__(
            f"Index {index} out of range for '{attribute}' (0..{size - 1})",
            "OPTION_INDEX_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.index = index


class CheckoutValidationError(StorefrontError):
    """Checkout submitted with missing required fields. One entry per empty field."""
    def __init__(self, field_errors: list[dict], context: ErrorContext | None = None):
        missing = [e["field"] for e in field_errors]
        super().__init__(
            f"Missing required checkout fields: {', '.join(missing)}",
            "CHECKOUT_VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_errors = field_errors

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.field_errors]

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.field_errors
        return response


class ProductNotConfigurableError(StorefrontError):
    """Customization started on a product that has no configurable options."""
    def __init__(self, product_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.product_id = product_id
        super().__init__(
            f"Product '{product_id}' cannot be customized",
            "PRODUCT_NOT_CONFIGURABLE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )


class EmptyCartError(StorefrontError):
    """Order submission attempted after the cart was emptied."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Cannot submit an order with an empty cart",
            "CART_EMPTY", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 409,
        )


class InvalidTransitionError(StorefrontError):
    """Dialog action invoked from a state that does not accept it."""
    def __init__(
        self, action: str, current_phase: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Action '{action}' is not available while {current_phase}",
            "INVALID_TRANSITION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.action = action
        self.current_phase = current_phase


# ─── Collaborator Errors (500-level) ────────────────────────────

class FulfillmentError(StorefrontError):
    """The fulfillment collaborator rejected or failed to record the order."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Order could not be placed, please retry"
        super().__init__(
            f"Order fulfillment failed: {message}",
            "FULFILLMENT_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
