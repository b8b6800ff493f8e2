# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file names every kind of problem the Plant Care Tracker can report: a plant or task that
# doesn't exist, bad input, a schedule that makes no sense, or a database hiccup.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy rooted at PlantCareException. Each class fixes its HTTP status and error
# code; constructor keywords become the ``details`` of the JSON error envelope.
# 🔗 Dependencies:
# FastAPI HTTPException, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Care schedule engine, plant care service, repositories, DB session manager, middleware,
# app.main exception handlers

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, status


def _with_details(details: Optional[Dict[str, Any]], **fields: Any) -> Dict[str, Any]:
    """Merge the non-empty keyword fields into a copy of ``details``."""
    merged = dict(details or {})
    for key, value in fields.items():
        if value is not None and value != "":
            merged[key] = value
    return merged


class PlantCareException(Exception):
    """
    Base exception class for the Plant Care Tracker.

    Subclasses pin ``status_code`` and ``error_code``; the exception handler
    in app.main renders them unchanged.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code or type(self).status_code
        self.details = details or {}
        self.error_code = error_code or type(self).error_code or type(self).__name__.upper()
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# CLIENT ERRORS
# =============================================================================

class ValidationError(PlantCareException):
    """Plant, task or activity data that fails validation."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_details(details, field=field, value=None if value is None else str(value)),
        )


class NotFoundError(PlantCareException):
    """A requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_details(
                details,
                resource_type=resource_type,
                resource_id=None if resource_id is None else str(resource_id),
            ),
        )


class PlantNotFoundError(NotFoundError):
    def __init__(self, plant_id: Any, message: Optional[str] = None):
        super().__init__(
            message or f"Plant not found: {plant_id}",
            resource_type="plant",
            resource_id=plant_id,
            details={"plant_id": plant_id},
        )


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: Any, message: Optional[str] = None):
        super().__init__(
            message or f"Care task not found: {task_id}",
            resource_type="task",
            resource_id=task_id,
            details={"task_id": task_id},
        )


class ConflictError(PlantCareException):
    """The request contradicts the current state (e.g. completing a completed task)."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "CONFLICT"

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message,
            details=_with_details(
                details,
                resource_type=resource_type,
                resource_id=None if resource_id is None else str(resource_id),
            ),
        )


class BusinessRuleViolationError(PlantCareException):
    """A domain rule was broken."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "BUSINESS_RULE_VIOLATION"

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=_with_details(details, rule=rule))


class CareScheduleError(BusinessRuleViolationError):
    """
    Invalid input to the care-schedule engine: a frequency below one day,
    a month index outside 0..11 or an unsupported year.
    """

    def __init__(
        self,
        message: str = "Care schedule error",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        plant_id: Optional[Any] = None,
    ):
        super().__init__(
            message,
            rule="care_schedule_validation",
            details=_with_details(
                None,
                field=field,
                value=None if value is None else str(value),
                plant_id=plant_id,
            ),
        )


# =============================================================================
# INFRASTRUCTURE ERRORS
# =============================================================================

class DatabaseError(PlantCareException):
    error_code = "DATABASE_ERROR"

    def __init__(self, message: str = "Database error", operation: Optional[str] = None):
        super().__init__(message, details=_with_details(None, operation=operation))


class RepositoryError(PlantCareException):
    """A repository query or write failed."""

    error_code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
    ):
        super().__init__(message, details=_with_details(None, operation=operation, entity=entity))


class TransactionError(PlantCareException):
    """Commit of the request's unit of work failed."""

    error_code = "TRANSACTION_ERROR"

    def __init__(self, message: str = "Database transaction failed", operation: Optional[str] = None):
        super().__init__(message, details=_with_details(None, operation=operation))


# =============================================================================
# HELPERS
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """Error payload for any exception; unknown ones become a generic 500."""
    if isinstance(exception, PlantCareException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }


def is_client_error(exception: Exception) -> bool:
    """Check if exception represents a client error (4xx)."""
    if isinstance(exception, (PlantCareException, HTTPException)):
        return 400 <= exception.status_code < 500

    return False
