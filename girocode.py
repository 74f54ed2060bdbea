# -*- coding: utf-8 -*-
"""
Public API: build, parse and validate EPC QR (GiroCode) payloads.

    >>> from girocode import PaymentRecord, generate, parse
    >>> payload = generate(PaymentRecord(recipient="Max Muster", iban="DE89 3704 0044 0532 0130 00"))
    >>> parse(payload).data.iban
    'DE89370400440532013000'
"""
from types import SimpleNamespace

from epc_errors import EpcError, ErrorCode
from epc_qr import generate, payload_to_qr_image
from epc_qr_decode import is_epc_qr, parse, parse_all_epc_qr_contents
from epc_types import (
    FieldCheck,
    GenerateOptions,
    ParseOutcome,
    PaymentRecord,
    ValidationError,
    ValidationReport,
)
from epc_validate import format_iban, validate, validate_bic, validate_iban

girocode = SimpleNamespace(
    generate=generate,
    parse=parse,
    is_epc_qr=is_epc_qr,
    validate=validate,
)

__all__ = [
    "EpcError",
    "ErrorCode",
    "FieldCheck",
    "GenerateOptions",
    "ParseOutcome",
    "PaymentRecord",
    "ValidationError",
    "ValidationReport",
    "format_iban",
    "generate",
    "girocode",
    "is_epc_qr",
    "parse",
    "parse_all_epc_qr_contents",
    "payload_to_qr_image",
    "validate",
    "validate_bic",
    "validate_iban",
]
