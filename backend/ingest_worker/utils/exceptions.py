"""Custom exceptions and error handling utilities."""
from fastapi import HTTPException, status
from typing import Any, Dict, List, Optional


class AppException(Exception):
    """Base exception for worker errors."""
    pass


class ValidationError(AppException):
    """Raised when a request body is not a well-formed batch."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ConfigurationError(AppException, ValueError):
    """Raised when a collaborator is missing its deployment configuration."""
    pass


def validation_error(message: str, errors: Optional[List[Dict[str, Any]]] = None) -> HTTPException:
    """
    Create a standardized 400 validation error.

    Args:
        message: Validation error message
        errors: Optional list of field-level errors

    Returns:
        HTTPException with 400 status
    """
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": message, "errors": errors or []},
    )


def configuration_error(error: ConfigurationError, collaborator: str) -> HTTPException:
    """
    Convert a missing-configuration error to a 500.

    Args:
        error: The configuration error raised while building the collaborator
        collaborator: Name of the collaborator that could not be built

    Returns:
        HTTPException with 500 status
    """
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{collaborator} is not configured: {error}",
    )
