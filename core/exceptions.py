"""Exception hierarchy of the diet planner.

Every error the core or the services raise derives from `AppException`, so the
HTTP layer can turn it into a response without knowing the concrete type.
Recoverable user errors (validation, no suitable recipe, missing entity) are
kept apart from contract defects and infrastructure faults.
"""

from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    error_type = "application_error"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """A referenced entity (recipe, diet plan, active plan) does not exist."""

    error_type = "not_found"

    def __init__(self, resource: str, identifier: Any = None):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Recipe', 'Active diet plan').
            identifier: ID that was not found, or None for singleton lookups.
        """
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """One or more field-level violations were found in user input.

    `errors` holds every collected message in the order it was found.
    """

    error_type = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None, errors: Optional[List[str]] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
            errors: Optional ordered list of all violation messages.
        """
        self.errors = list(errors) if errors else [message]
        details = {"field": field} if field else {}
        if errors:
            details["errors"] = self.errors
        super().__init__(message, status_code=400, details=details)

    @classmethod
    def from_messages(cls, errors: List[str]) -> "ValidationError":
        """Build a validation error out of an accumulated message list."""
        summary = "%d validation error(s): %s" % (len(errors), errors[0]) if errors else "Validation failed"
        return cls(summary, errors=errors)


class NoOptimalSolutionError(AppException):
    """No recipe survives the filters for a recommendation request."""

    error_type = "no_optimal_solution"

    def __init__(self, meal_slot: Any):
        label = getattr(meal_slot, "label", meal_slot)
        super().__init__(
            f"No suitable recipe found for {str(label).lower()}",
            status_code=409,
            details={"meal_slot": getattr(meal_slot, "value", meal_slot)}
        )


class InvalidInputError(AppException):
    """A request handed to the core is malformed.

    This is a contract violation by the caller, not a user input error.
    """

    error_type = "invalid_input"

    def __init__(self, message: str, argument: Optional[str] = None):
        details = {"argument": argument} if argument else {}
        super().__init__(message, status_code=400, details=details)


class InvalidFormatError(AppException):
    """A serialized value (e.g. a tag string) could not be parsed."""

    error_type = "invalid_format"

    def __init__(self, message: str, value: Optional[str] = None):
        details = {"value": value} if value is not None else {}
        super().__init__(message, status_code=400, details=details)


class InfrastructureError(AppException):
    """A persistence operation failed.

    The store's own error text is never part of the message; it is logged
    where the failure is caught.
    """

    error_type = "infrastructure_error"

    def __init__(self, operation: Optional[str] = None):
        """Initialize infrastructure error.

        Args:
            operation: Optional operation that failed (e.g., 'create', 'update').
        """
        details = {"operation": operation} if operation else {}
        super().__init__("A persistence error occurred", status_code=500, details=details)
