"""
Custom exceptions for the LMS registry.
"""

from typing import Optional, Any, Dict


class LMSException(Exception):
    """Base exception for all LMS-related errors."""

    default_code = "lms_error"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}


class ValidationError(LMSException):
    """Raised when data validation fails."""
    default_code = "validation_error"


class InvalidIndexError(LMSException, IndexError):
    """Raised when a course or content index is out of range."""
    default_code = "invalid_index"

    def __init__(self, message: str = "Invalid course index!", **kwargs):
        super().__init__(message, **kwargs)


class AuthError(LMSException):
    """Raised when no user matches the supplied credentials."""
    default_code = "auth_failed"


class ResourceNotFoundError(LMSException):
    """Raised when a requested resource is not found."""
    default_code = "not_found"


class BootstrapError(LMSException):
    """Raised when the registry cannot be seeded at startup."""
    default_code = "bootstrap_failed"


class ConfigurationError(LMSException):
    """Raised when configuration is invalid."""
    default_code = "configuration_error"
