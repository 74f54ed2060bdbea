# -*- coding: utf-8 -*-
"""
Data classes shared by the encoder, the decoder and the validators.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Union

from epc_constants import DEFAULT_ENCODING, DEFAULT_VERSION
from epc_errors import ErrorCode

Amount = Union[int, float, Decimal]


@dataclass(frozen=True)
class PaymentRecord:
    """Один платёж SEPA Credit Transfer."""
    recipient: str
    iban: str
    bic: Optional[str] = None
    amount: Optional[Amount] = None       # EUR, не более 2 знаков после точки
    reference: Optional[str] = None       # RF... (структурированная) или свободный текст
    message: Optional[str] = None


@dataclass(frozen=True)
class GenerateOptions:
    version: str = DEFAULT_VERSION
    encoding: str = DEFAULT_ENCODING


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str
    code: ErrorCode


@dataclass(frozen=True)
class FieldCheck:
    """Result of validating a single field (IBAN or BIC)."""
    valid: bool
    error: Optional[ValidationError] = None


@dataclass
class ValidationReport:
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of parse(): either data (valid) or a diagnostic string (invalid).
    Check `valid` before reading `data`.
    """
    valid: bool
    data: Optional[PaymentRecord] = None
    error: Optional[str] = None
    version: Optional[str] = None
    encoding: Optional[str] = None

    @classmethod
    def success(cls, data: PaymentRecord, version: str, encoding: str) -> "ParseOutcome":
        return cls(valid=True, data=data, version=version, encoding=encoding)

    @classmethod
    def failure(cls, error: str) -> "ParseOutcome":
        return cls(valid=False, error=error)
