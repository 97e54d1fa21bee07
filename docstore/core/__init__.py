"""
Core utilities: configuration, errors and logging.
"""
from .config import StoreSettings, UpdatePolicy, LogFormat, get_settings
from .errors import (
    ErrorCode,
    AppError,
    ValidationError,
    InvalidDocumentError,
    InvalidSearchRequestError,
    ConfigurationError,
)
from .logging_framework import LogCategory, configure_logging

__all__ = [
    "StoreSettings",
    "UpdatePolicy",
    "LogFormat",
    "get_settings",
    "ErrorCode",
    "AppError",
    "ValidationError",
    "InvalidDocumentError",
    "InvalidSearchRequestError",
    "ConfigurationError",
    "LogCategory",
    "configure_logging",
]
