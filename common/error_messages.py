"""
User-friendly error messages and status codes.

This module provides centralized error message definitions so that every
failure leaves the API as ``{"success": false, "message": ...}``.
"""
from typing import Tuple, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    # Validation Errors (400)
    MISSING_UPLOAD_FILE = "MISSING_UPLOAD_FILE"
    INVALID_FORMAT = "INVALID_FORMAT"

    # Routing Errors (404, 405)
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Generic Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# User-friendly error messages mapped to error codes
ERROR_MESSAGES = {
    ErrorCode.MISSING_UPLOAD_FILE: "No file was uploaded.",
    ErrorCode.INVALID_FORMAT: "The request body could not be read. Send a valid JSON object.",
    ErrorCode.RESOURCE_NOT_FOUND: "The requested resource could not be found.",
    ErrorCode.METHOD_NOT_ALLOWED: "This method is not allowed for the requested resource.",
    ErrorCode.UNKNOWN_ERROR: "Something unexpected happened. Please try again.",
}


# HTTP status codes for each error type
ERROR_STATUS_CODES = {
    ErrorCode.MISSING_UPLOAD_FILE: 400,
    ErrorCode.INVALID_FORMAT: 400,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.METHOD_NOT_ALLOWED: 405,
    ErrorCode.UNKNOWN_ERROR: 500,
}


class ApiError(Exception):
    """Application error rendered by the API as a structured failure body."""

    def __init__(self, error_code: ErrorCode, detail: Optional[str] = None):
        self.error_code = error_code
        self.detail = detail
        message, status_code = get_error_response(error_code)
        self.message = message
        self.status_code = status_code
        super().__init__(format_error_detail(error_code, detail))


def get_error_response(
    error_code: ErrorCode,
    custom_message: Optional[str] = None
) -> Tuple[str, int]:
    """
    Get user-friendly error message and HTTP status code.

    Args:
        error_code: The error code enum
        custom_message: Optional custom message to append to the standard message

    Returns:
        Tuple of (error_message, status_code)
    """
    message = ERROR_MESSAGES.get(error_code, ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR])
    status_code = ERROR_STATUS_CODES.get(error_code, 500)

    if custom_message:
        message = f"{message} {custom_message}"

    return message, status_code


def format_error_detail(error_code: ErrorCode, detail: Optional[str] = None) -> str:
    """Format error detail for logs."""
    base_message = ERROR_MESSAGES.get(error_code, ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR])

    if detail:
        return f"{base_message} ({detail})"

    return base_message


def error_body(message: str) -> dict:
    """Structured failure body shared by every error response."""
    return {"success": False, "message": message}
