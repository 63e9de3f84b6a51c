"""
Centralised error handling for the product import.
"""
from abc import ABC
from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(Enum):
    """Standardised error codes"""
    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_BACKEND_TYPE = "UNKNOWN_BACKEND_TYPE"
    UNSUPPORTED_DELETE_STRATEGY = "UNSUPPORTED_DELETE_STRATEGY"

    # Row level errors
    INVALID_VISIBILITY = "INVALID_VISIBILITY"
    DATE_PARSE_ERROR = "DATE_PARSE_ERROR"
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_ATTRIBUTE_VALUE = "INVALID_ATTRIBUTE_VALUE"

    # Configuration errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    CALLBACK_NOT_FOUND = "CALLBACK_NOT_FOUND"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"


class BaseApplicationException(Exception, ABC):
    """Base exception for the import"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Converts the exception into a dict, e.g. for an import report"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationException(BaseApplicationException):
    """Invalid arguments passed to the import API"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class RowException(BaseApplicationException):
    """
    Aborts the processing of the current row.

    The bunch loop is expected to catch it, record it against the row
    and continue with the next one.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        filename: Optional[str] = None,
        line_number: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = dict(details or {})
        error_details["filename"] = filename
        error_details["line_number"] = line_number
        self.filename = filename
        self.line_number = line_number
        super().__init__(message, error_code, error_details)


class InvalidVisibilityException(RowException):
    """Unknown visibility label"""

    def __init__(self, value: Any, filename: Optional[str] = None, line_number: Optional[int] = None):
        self.value = value
        super().__init__(
            f"Found invalid visibility {value} in file {filename} on line {line_number}",
            ErrorCode.INVALID_VISIBILITY,
            filename,
            line_number,
            {"value": value}
        )


class DateParseException(RowException):
    """Datetime value does not match the configured source date format"""

    def __init__(
        self,
        value: Any,
        date_format: str,
        filename: Optional[str] = None,
        line_number: Optional[int] = None
    ):
        self.value = value
        self.date_format = date_format
        super().__init__(
            f"Can't parse date {value!r} with format {date_format!r} in file {filename} on line {line_number}",
            ErrorCode.DATE_PARSE_ERROR,
            filename,
            line_number,
            {"value": value, "date_format": date_format}
        )


class InvalidNumberException(RowException):
    """Non numeric value for a numeric backend type"""

    def __init__(
        self,
        value: Any,
        backend_type: str,
        filename: Optional[str] = None,
        line_number: Optional[int] = None
    ):
        self.value = value
        super().__init__(
            f"Can't cast {value!r} to {backend_type} in file {filename} on line {line_number}",
            ErrorCode.INVALID_NUMBER,
            filename,
            line_number,
            {"value": value, "backend_type": backend_type}
        )


class InvalidAttributeValueException(RowException):
    """A callback can't map the attribute value"""

    def __init__(
        self,
        attribute_code: str,
        value: Any,
        filename: Optional[str] = None,
        line_number: Optional[int] = None
    ):
        self.attribute_code = attribute_code
        self.value = value
        super().__init__(
            f"Found invalid value {value!r} for attribute {attribute_code} in file {filename} on line {line_number}",
            ErrorCode.INVALID_ATTRIBUTE_VALUE,
            filename,
            line_number,
            {"attribute_code": attribute_code, "value": value}
        )


class ConfigurationException(BaseApplicationException):
    """The import configuration can't be loaded"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class CallbackNotFoundException(ConfigurationException):
    """A callback id can't be resolved to a callback class"""

    def __init__(self, callback_id: str, reason: Optional[str] = None):
        message = f"Can't find callback {callback_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, ErrorCode.CALLBACK_NOT_FOUND, {"callback_id": callback_id})


class InfrastructureException(BaseApplicationException):
    """Database errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details)


class ExceptionFactory:
    """Factory for frequently raised exceptions"""

    @staticmethod
    def unknown_backend_type(backend_type: Any) -> ValidationException:
        return ValidationException(
            f"Unknown backend type '{backend_type}'",
            ErrorCode.UNKNOWN_BACKEND_TYPE,
            {"backend_type": backend_type}
        )

    @staticmethod
    def unsupported_delete_strategy(entity_type: str, strategy: Any) -> ValidationException:
        return ValidationException(
            f"Delete strategy '{strategy}' is not supported for {entity_type}",
            ErrorCode.UNSUPPORTED_DELETE_STRATEGY,
            {"entity_type": entity_type, "strategy": str(strategy)}
        )
