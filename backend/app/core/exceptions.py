"""
Application exception types.

Two failure kinds matter at runtime:
- ConfigurationError: the process is misconfigured and must not start
- DataAccessError: a store operation failed while serving a request
"""


class AppError(Exception):
    """Base class for application errors."""


class ConfigurationError(AppError):
    """Raised when required configuration is missing or invalid."""


class DataAccessError(AppError):
    """Raised when reading from the document store fails."""
