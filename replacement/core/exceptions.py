# replacement/core/exceptions.py

"""Custom exception hierarchy for the JSON replacement service.

This module defines the specific error types used throughout the application
to differentiate between configuration, validation, and runtime errors.
"""


class ReplacementError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(ReplacementError):
    """Raised when configuration loading or validation fails."""

    pass


class ValidationError(ReplacementError):
    """Raised when input validation fails (e.g., missing payload)."""

    pass
