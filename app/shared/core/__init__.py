"""
Core utilities package for Plant Care Application.
Provides the application exception hierarchy.
"""

from .exceptions import (
    BusinessRuleViolationError,
    CareScheduleError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    PlantCareException,
    PlantNotFoundError,
    RepositoryError,
    TaskNotFoundError,
    TransactionError,
    ValidationError,
)

__all__ = [
    "PlantCareException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "BusinessRuleViolationError",
    "PlantNotFoundError",
    "TaskNotFoundError",
    "CareScheduleError",
    "DatabaseError",
    "RepositoryError",
    "TransactionError",
]
