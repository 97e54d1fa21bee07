"""
Application Exception Hierarchy
Consistent exception handling across the document store.
"""
from typing import Optional, Dict, Any, List
from enum import Enum
import traceback


class ErrorCode(str, Enum):
    """Standardized error codes"""
    # General errors (1xxx)
    INTERNAL_ERROR = "ERR_1000"
    VALIDATION_ERROR = "ERR_1001"
    CONFIGURATION_ERROR = "ERR_1002"

    # Data errors (7xxx)
    INVALID_DOCUMENT = "ERR_7000"
    INVALID_SEARCH_REQUEST = "ERR_7001"


class AppError(Exception):
    """
    Base application exception.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

        # Capture stack trace
        self._stack_trace = traceback.format_exc() if cause else None

    def to_dict(self, include_trace: bool = False) -> Dict[str, Any]:
        """Convert exception to dictionary"""
        result = {
            "success": False,
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details
            }
        }

        if include_trace and self._stack_trace:
            result["error"]["trace"] = self._stack_trace

        return result

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


# ==================== Validation Errors ====================

class ValidationError(AppError):
    """Validation error"""

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[List[Dict[str, Any]]] = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if errors:
            details["validation_errors"] = errors

        super().__init__(message, code, details=details, **kwargs)


class InvalidDocumentError(ValidationError):
    """Input could not be turned into a Document"""

    def __init__(self, message: str = "Invalid document", **kwargs):
        super().__init__(message, code=ErrorCode.INVALID_DOCUMENT, **kwargs)


class InvalidSearchRequestError(ValidationError):
    """Input could not be turned into a SearchRequest"""

    def __init__(self, message: str = "Invalid search request", **kwargs):
        super().__init__(message, code=ErrorCode.INVALID_SEARCH_REQUEST, **kwargs)


# ==================== Configuration Errors ====================

class ConfigurationError(AppError):
    """Invalid store configuration"""

    def __init__(
        self,
        message: str = "Invalid configuration",
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if errors:
            details["validation_errors"] = errors

        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details=details, **kwargs)
