# -*- coding: utf-8 -*-
"""
Validation of payment records against the SEPA rules used by EPC QR:
IBAN (format, country, length, MOD-97 per ISO 13616), BIC shape, field lengths
and the amount range.
"""
import math
import re
from decimal import Decimal
from typing import List

from epc_constants import (
    MAX_AMOUNT,
    MAX_MESSAGE_LENGTH,
    MAX_RECIPIENT_LENGTH,
    MAX_REFERENCE_LENGTH,
    SEPA_COUNTRIES,
    clean_string,
)
from epc_errors import ErrorCode
from epc_types import FieldCheck, PaymentRecord, ValidationError, ValidationReport

_IBAN_RE = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{1,30}$")
_BIC_RE = re.compile(r"^[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?$")

# Digits appended to the running remainder per step
_CHECKSUM_CHUNK = 7


def _iban_checksum_ok(iban: str) -> bool:
    rearranged = iban[4:] + iban[:4]
    digits = "".join(
        str(ord(ch) - 55) if "A" <= ch <= "Z" else ch for ch in rearranged
    )
    remainder = 0
    for i in range(0, len(digits), _CHECKSUM_CHUNK):
        remainder = int(str(remainder) + digits[i:i + _CHECKSUM_CHUNK]) % 97
    return remainder == 1


def validate_iban(raw: str) -> FieldCheck:
    """
    Проверка IBAN: формат, страна SEPA, длина для страны, контрольная сумма MOD-97.
    Возвращает только первую найденную ошибку.
    """
    iban = clean_string(raw)

    if not _IBAN_RE.match(iban):
        return FieldCheck(False, ValidationError(
            "iban", "IBAN format is invalid", ErrorCode.IBAN_INVALID_FORMAT,
        ))

    country = iban[:2]
    expected_len = SEPA_COUNTRIES.get(country)
    if expected_len is None:
        return FieldCheck(False, ValidationError(
            "iban",
            f"Country code {country} is not a SEPA country",
            ErrorCode.IBAN_INVALID_COUNTRY,
        ))

    # Length mismatch is reported as a format error
    if len(iban) != expected_len:
        return FieldCheck(False, ValidationError(
            "iban",
            f"IBAN for {country} must be {expected_len} characters",
            ErrorCode.IBAN_INVALID_FORMAT,
        ))

    if not _iban_checksum_ok(iban):
        return FieldCheck(False, ValidationError(
            "iban", "IBAN checksum is invalid", ErrorCode.IBAN_INVALID_CHECKSUM,
        ))

    return FieldCheck(True)


def validate_bic(raw: str) -> FieldCheck:
    """BIC has no checksum, only the 8/11 character shape is checked."""
    if not _BIC_RE.match(clean_string(raw)):
        return FieldCheck(False, ValidationError(
            "bic",
            "BIC format is invalid (must be 8 or 11 characters)",
            ErrorCode.BIC_INVALID_FORMAT,
        ))
    return FieldCheck(True)


def format_iban(iban: str) -> str:
    """DE89370400440532013000 -> DE89 3704 0044 0532 0130 00"""
    cleaned = clean_string(iban)
    return " ".join(cleaned[i:i + 4] for i in range(0, len(cleaned), 4))


def _is_valid_amount(amount) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return False
    if isinstance(amount, Decimal):
        if not amount.is_finite():
            return False
    elif not math.isfinite(amount):
        return False
    return amount >= 0


def validate(record: PaymentRecord) -> ValidationReport:
    """
    Проверяет все поля платежа и собирает все ошибки (без остановки на первой).
    Порядок ошибок: recipient, iban, bic, amount, reference, message.
    """
    errors: List[ValidationError] = []

    recipient = record.recipient
    if not recipient or not recipient.strip():
        errors.append(ValidationError(
            "recipient", "Recipient is required", ErrorCode.RECIPIENT_REQUIRED,
        ))
    elif len(recipient) > MAX_RECIPIENT_LENGTH:
        errors.append(ValidationError(
            "recipient",
            f"Recipient must be {MAX_RECIPIENT_LENGTH} characters or less",
            ErrorCode.RECIPIENT_TOO_LONG,
        ))

    if not record.iban or not record.iban.strip():
        errors.append(ValidationError(
            "iban", "IBAN is required", ErrorCode.IBAN_REQUIRED,
        ))
    else:
        check = validate_iban(record.iban)
        if not check.valid and check.error:
            errors.append(check.error)

    if record.bic:
        check = validate_bic(record.bic)
        if not check.valid and check.error:
            errors.append(check.error)

    if record.amount is not None:
        if not _is_valid_amount(record.amount):
            errors.append(ValidationError(
                "amount", "Amount must be a positive number", ErrorCode.AMOUNT_INVALID,
            ))
        elif record.amount > MAX_AMOUNT:
            errors.append(ValidationError(
                "amount",
                f"Amount must not exceed {MAX_AMOUNT}",
                ErrorCode.AMOUNT_TOO_LARGE,
            ))

    if record.reference and len(record.reference) > MAX_REFERENCE_LENGTH:
        errors.append(ValidationError(
            "reference",
            f"Reference must be {MAX_REFERENCE_LENGTH} characters or less",
            ErrorCode.REFERENCE_TOO_LONG,
        ))

    if record.message and len(record.message) > MAX_MESSAGE_LENGTH:
        errors.append(ValidationError(
            "message",
            f"Message must be {MAX_MESSAGE_LENGTH} characters or less",
            ErrorCode.MESSAGE_TOO_LONG,
        ))

    return ValidationReport(errors)
