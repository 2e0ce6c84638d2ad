"""
Custom Exceptions for GymHub
============================

Every error a request can end with is one of these. The exception handlers in
gymhub.main turn them into a single JSON body: {"message": ...}.

Usage:
    from gymhub.core.exceptions import FeePackageNotFoundError

    package = await db.get(FeePackage, package_id)
    if not package:
        raise FeePackageNotFoundError(package_id)
"""

from typing import Optional, Any, Dict


class GymHubError(Exception):
    """Base exception for all GymHub errors"""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ServerError(GymHubError):
    """Unexpected failure"""

    def __init__(self, message: str = "Server error"):
        super().__init__(message, code="SERVER_ERROR")


# ============================================
# Authentication & Authorization Errors
# ============================================

class AuthenticationError(GymHubError):
    """Request could not be tied to an account (401)"""

    status_code = 401

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="AUTH_FAILED")


class InvalidTokenError(AuthenticationError):
    """Bearer token is malformed, badly signed or of the wrong type"""

    def __init__(self, message: str = "Not authorized, token failed"):
        super().__init__(message)
        self.code = "INVALID_TOKEN"


class TokenExpiredError(InvalidTokenError):
    """Bearer token has expired"""

    def __init__(self):
        super().__init__("Not authorized, token expired")
        self.code = "TOKEN_EXPIRED"


class AuthorizationError(GymHubError):
    """Account is authenticated but not allowed to do this (403)"""

    status_code = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(GymHubError):
    """Base class for not found errors"""

    status_code = 404

    def __init__(self, resource_type: str, resource_id: Optional[str] = None):
        super().__init__(
            f"{resource_type} not found",
            code=f"{resource_type.upper().replace(' ', '_')}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class AccountNotFoundError(ResourceNotFoundError):
    def __init__(self, account_id: Optional[str] = None):
        super().__init__("Member", account_id)


class FeePackageNotFoundError(ResourceNotFoundError):
    def __init__(self, package_id: Optional[str] = None):
        super().__init__("Fee package", package_id)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(GymHubError):
    """Input validation failed"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class ConflictError(GymHubError):
    """Uniqueness violation (username, package name, supplement name, diet title)"""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="CONFLICT", details=details)


class InvalidDurationError(ValidationError):
    """Duration text is not '<integer> <unit>'"""

    def __init__(self, duration: str):
        super().__init__(f"Invalid package duration format: {duration}", field="duration")
        self.code = "INVALID_DURATION"


class UnrecognizedDurationUnitError(InvalidDurationError):
    """Duration unit outside the day/month/year table"""

    def __init__(self, duration: str, unit: str):
        super().__init__(duration)
        self.message = f"Invalid package duration format: {duration} (unknown unit '{unit}')"
        self.args = (self.message,)
        self.code = "UNRECOGNIZED_DURATION_UNIT"
        self.details["unit"] = unit


class InvalidStartDateError(ValidationError):
    """Explicit membership start date could not be parsed"""

    def __init__(self, value: Any):
        super().__init__(f"Invalid start date: {value!r}", field="startDate")
        self.code = "INVALID_START_DATE"
