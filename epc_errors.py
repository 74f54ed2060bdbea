# -*- coding: utf-8 -*-
"""
Error codes and the exception raised when a payment cannot be encoded.
"""
from enum import Enum


class ErrorCode(str, Enum):
    RECIPIENT_REQUIRED = "RECIPIENT_REQUIRED"
    RECIPIENT_TOO_LONG = "RECIPIENT_TOO_LONG"
    IBAN_REQUIRED = "IBAN_REQUIRED"
    IBAN_INVALID_FORMAT = "IBAN_INVALID_FORMAT"
    IBAN_INVALID_CHECKSUM = "IBAN_INVALID_CHECKSUM"
    IBAN_INVALID_COUNTRY = "IBAN_INVALID_COUNTRY"
    BIC_INVALID_FORMAT = "BIC_INVALID_FORMAT"
    AMOUNT_INVALID = "AMOUNT_INVALID"
    AMOUNT_TOO_LARGE = "AMOUNT_TOO_LARGE"
    REFERENCE_TOO_LONG = "REFERENCE_TOO_LONG"
    MESSAGE_TOO_LONG = "MESSAGE_TOO_LONG"
    # Reserved, no validator emits it yet
    INVALID_CHARACTERS = "INVALID_CHARACTERS"


class EpcError(ValueError):
    """Raised by generate() with the first validation error of the record."""

    def __init__(self, message: str, code: ErrorCode, field: str):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field

    def __str__(self) -> str:
        return f"{self.field}: {self.message} ({self.code.value})"
