"""
Custom exceptions for the Coursehub catalog.

Catalog operations themselves never raise: invalid enrollments, unknown
courses and repeated removals are defined as no-ops. These exceptions only
surface when a catalog is built from an invalid configuration.
"""

from typing import Optional, Any, Dict


class CoursehubException(Exception):
    """
    Base exception for all Coursehub-related errors.

    ``error_code`` is a short machine-readable tag such as ``"invalid_config"``.
    ``details`` carries structured context; for configuration errors its
    ``errors`` key holds the field errors reported by pydantic.
    """

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(CoursehubException):
    """Raised when configuration is invalid."""
    pass
