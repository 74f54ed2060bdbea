# -*- coding: utf-8 -*-
"""
Константы формата EPC QR (EPC069-12): служебные коды, номера строк,
ограничения полей и таблица стран SEPA с длинами IBAN.
"""
import re
from types import MappingProxyType
from typing import Mapping, Optional

SERVICE_TAG = "BCD"
SCT_ID = "SCT"
CURRENCY = "EUR"

DEFAULT_VERSION = "002"
DEFAULT_ENCODING = "UTF-8"

VERSIONS = ("001", "002")

# Character set name -> code on line 2
ENCODINGS: Mapping[str, str] = MappingProxyType({
    "UTF-8": "1",
    "ISO-8859-1": "2",
})
ENCODING_NAMES: Mapping[str, str] = MappingProxyType(
    {code: name for name, code in ENCODINGS.items()}
)

# Line positions in the payload (0-based)
LINE_SERVICE_TAG = 0
LINE_VERSION = 1
LINE_ENCODING = 2
LINE_SCT_ID = 3
LINE_BIC = 4
LINE_RECIPIENT = 5
LINE_IBAN = 6
LINE_AMOUNT = 7
LINE_PURPOSE_CODE = 8
LINE_STRUCTURED_REF = 9
LINE_UNSTRUCTURED_REF = 10
LINE_MESSAGE = 11
LINE_COUNT = 12

MAX_RECIPIENT_LENGTH = 70
MAX_AMOUNT = 999999999.99
MAX_REFERENCE_LENGTH = 35
MAX_MESSAGE_LENGTH = 140

STRUCTURED_REF_PREFIX = "RF"

# SEPA country code -> total IBAN length
SEPA_COUNTRIES: Mapping[str, int] = MappingProxyType({
    "AT": 20, "BE": 16, "BG": 22, "HR": 21, "CY": 28,
    "CZ": 24, "DK": 18, "EE": 20, "FI": 18, "FR": 27,
    "DE": 22, "GR": 27, "HU": 28, "IE": 22, "IT": 27,
    "LV": 21, "LT": 20, "LU": 20, "MT": 31, "NL": 18,
    "PL": 28, "PT": 25, "RO": 24, "SK": 24, "SI": 19,
    "ES": 24, "SE": 24, "CH": 21, "GB": 22, "IS": 26,
    "LI": 21, "NO": 15, "MC": 27, "SM": 27, "AD": 24,
    "VA": 22,
})

_WHITESPACE_RE = re.compile(r"\s+")


def clean_string(value: Optional[str]) -> str:
    """Убирает все пробельные символы и переводит в верхний регистр (IBAN, BIC)."""
    return _WHITESPACE_RE.sub("", value or "").upper()
