"""
Domain errors raised by the receipt service
"""

from fastapi import status


class ErrorCode:
    MISSING_CHAIN = "MISSING_CHAIN"
    MISSING_ADDRESS = "MISSING_ADDRESS"
    MISSING_AMOUNT = "MISSING_AMOUNT"
    MISSING_PUBLIC_CODE = "MISSING_PUBLIC_CODE"
    REQUIREMENT_NOT_CONFIRMED = "REQUIREMENT_NOT_CONFIRMED"

    INVALID_BODY = "INVALID_BODY"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"


class ErrorMessage:
    MISSING_CHAIN = "Missing chain"
    MISSING_ADDRESS = "Missing address"
    MISSING_AMOUNT = "Missing amount"
    MISSING_PUBLIC_CODE = "Missing publicCode"
    REQUIREMENT_NOT_CONFIRMED = "Requirement not confirmed"

    INVALID_BODY = "Invalid request body"
    NOT_FOUND = "Not found"
    UNAUTHORIZED = "Unauthorized"


class ReceiptServiceError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class IntakeValidationError(ReceiptServiceError):
    """A submission failed one of the presence checks"""


class InvalidStatusTransition(ReceiptServiceError):
    """A status change was requested from a terminal state or back to Pending"""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str):
        super().__init__(ErrorCode.INVALID_STATUS_TRANSITION, message)


class RecordNotFound(ReceiptServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = ErrorMessage.NOT_FOUND):
        super().__init__(ErrorCode.NOT_FOUND, message)


class AdminUnauthorized(ReceiptServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = ErrorMessage.UNAUTHORIZED):
        super().__init__(ErrorCode.UNAUTHORIZED, message)
