"""
Core module - Exceptions and logging setup.
"""
from app.core.exceptions import AppError, ConfigurationError, DataAccessError
from app.core.logging import setup_logging

__all__ = [
    "AppError",
    "ConfigurationError",
    "DataAccessError",
    "setup_logging",
]
