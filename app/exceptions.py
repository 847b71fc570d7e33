# =============================================================================
# app/exceptions.py - Domain Exceptions
# =============================================================================
# Centralized error taxonomy for the review domain.
# Errors should tell HOW to fix, not just WHAT failed.
#
# - NotFoundError: an identity does not exist in storage (raised by ports)
# - DomainValidationError: a business rule was violated (raised by services)
# - DuplicationError: a uniqueness constraint was violated (raised by ports)
# =============================================================================

from typing import Any


class CampusCoffeeException(Exception):
    """
    Base exception for the CampusCoffee domain.

    All custom exceptions inherit from this class.
    Provides structured error information with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CAMPUSCOFFEE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a response dict for outer layers."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Storage Exceptions
# =============================================================================

class NotFoundError(CampusCoffeeException):
    """Raised when an entity with the given identity doesn't exist."""

    def __init__(self, entity_type: type, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity_type.__name__} with ID {entity_id} does not exist",
            code="NOT_FOUND",
            suggestion=f"Check that the {entity_type.__name__} ID is correct and the entity hasn't been deleted",
            details={"entity_type": entity_type.__name__, "entity_id": entity_id}
        )


class DuplicationError(CampusCoffeeException):
    """Raised when a write violates a uniqueness constraint."""

    def __init__(self, entity_type: type, field: str, value: Any):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            message=f"{entity_type.__name__} with {field} '{value}' already exists",
            code="DUPLICATION",
            suggestion=f"Choose a different {field} or update the existing {entity_type.__name__}",
            details={"entity_type": entity_type.__name__, "field": field, "value": value}
        )


# =============================================================================
# Business Rule Exceptions
# =============================================================================

class DomainValidationError(CampusCoffeeException):
    """Raised when a business rule is violated (e.g., self-approval)."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        self.reason = reason
        super().__init__(
            message=reason,
            code="VALIDATION_ERROR",
            details=details,
        )
