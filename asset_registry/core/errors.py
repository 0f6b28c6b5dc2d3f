"""Error Hierarchy — typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every registry rule error is detected before the commit point (store unchanged)
    - CounterOverflowError is the only systemic limit; the rest are caller-correctable
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with RegistryError base: FastAPI global handler catches all
    - Pure core validators RETURN instances; the service raises them before commit
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
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    caller: str | None = None
    identity: str | None = None
    debug_info: dict[str, Any] | None = None


class RegistryError(Exception):
    """Base exception for all registry errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "caller": self.context.caller,
                    "identity": self.context.identity,
                },
            }
        }


# ─── Registry Rule Errors (400-level) ───────────────────────────

class DuplicateIdentityError(RegistryError):
    """Generated identity already exists in the registry."""
    def __init__(self, identity: bytes, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.identity = identity.hex()
        super().__init__(
            "Generated identity already exists. Retry in a later extrinsic or block.",
            "DUPLICATE_IDENTITY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class CapacityExceededError(RegistryError):
    """Owner index is already at max_owned."""
    def __init__(self, account: str, capacity: int, context: ErrorContext | None = None):
        super().__init__(
            f"Account '{account}' already owns the maximum of {capacity} assets.",
            "CAPACITY_EXCEEDED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.account = account
        self.capacity = capacity


class AssetNotFoundError(RegistryError):
    """Asset is absent from the registry or from the owner's index."""
    def __init__(self, identity: bytes, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.identity = identity.hex()
        super().__init__(
            f"Asset '{identity.hex()}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class NotOwnerError(RegistryError):
    """Caller does not own the asset."""
    def __init__(self, caller: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.caller = caller
        super().__init__(
            f"Account '{caller}' is not the owner of this asset.",
            "NOT_OWNER", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 403,
        )


class SelfTransferError(RegistryError):
    """Transfer target equals the caller."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Cannot transfer an asset to its current owner.",
            "SELF_TRANSFER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidIdentityError(RegistryError):
    """Identity supplied at the API boundary is not valid hex."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(
            f"Identity '{raw[:80]}' is not a non-empty hex string",
            "INVALID_IDENTITY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Systemic / Infrastructure Errors (500-level) ───────────────

class CounterOverflowError(RegistryError):
    """Total-created counter cannot be incremented further."""
    def __init__(self, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Total-created counter reached its limit ({limit})",
            "OVERFLOW", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.limit = limit


class DatabaseError(RegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
