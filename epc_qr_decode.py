# -*- coding: utf-8 -*-
"""
Парсинг содержимого EPC QR кода (строка, полученная при декодировании QR).
Проверяются только структурные признаки формата, бизнес-правила SEPA — нет.
"""
import logging
import re
from typing import Iterable, List, Optional

from epc_constants import (
    CURRENCY,
    ENCODING_NAMES,
    LINE_AMOUNT,
    LINE_BIC,
    LINE_ENCODING,
    LINE_IBAN,
    LINE_MESSAGE,
    LINE_RECIPIENT,
    LINE_SCT_ID,
    LINE_SERVICE_TAG,
    LINE_STRUCTURED_REF,
    LINE_UNSTRUCTURED_REF,
    LINE_VERSION,
    SCT_ID,
    SERVICE_TAG,
    VERSIONS,
)
from epc_types import ParseOutcome, PaymentRecord

logger = logging.getLogger(__name__)

# Enough lines to reach the IBAN
MIN_LINES = LINE_IBAN + 1

_AMOUNT_RE = re.compile(r"^" + CURRENCY + r"([0-9]+(?:\.[0-9]{1,2})?)$")


def _line(lines: List[str], index: int) -> str:
    return lines[index] if index < len(lines) else ""


def _parse_amount(line: str) -> Optional[float]:
    """EUR12.30 -> 12.3; строки другого вида считаются отсутствием суммы."""
    m = _AMOUNT_RE.match(line)
    if not m:
        return None
    return float(m.group(1))


def parse(qr_string: str) -> ParseOutcome:
    """
    Парсит одну строку — содержимое декодированного EPC QR кода.
    Never raises; invalid input gives ParseOutcome with a diagnostic message.
    """
    if not isinstance(qr_string, str) or not qr_string:
        return ParseOutcome.failure("Input is empty or not a string")

    lines = qr_string.split("\n")
    if len(lines) < MIN_LINES:
        return ParseOutcome.failure("Invalid EPC format: insufficient data")

    if lines[LINE_SERVICE_TAG] != SERVICE_TAG:
        return ParseOutcome.failure(
            f'Invalid EPC format: expected service tag "{SERVICE_TAG}", got {lines[LINE_SERVICE_TAG]!r}'
        )

    version = lines[LINE_VERSION]
    if version not in VERSIONS:
        return ParseOutcome.failure(f"Invalid EPC version: {version!r}")

    encoding = ENCODING_NAMES.get(lines[LINE_ENCODING])
    if encoding is None:
        return ParseOutcome.failure(f"Invalid encoding identifier: {lines[LINE_ENCODING]!r}")

    if lines[LINE_SCT_ID] != SCT_ID:
        return ParseOutcome.failure(
            f'Invalid identification code: expected "{SCT_ID}", got {lines[LINE_SCT_ID]!r}'
        )

    recipient = lines[LINE_RECIPIENT]
    if not recipient:
        return ParseOutcome.failure("Invalid EPC format: missing recipient")

    iban = lines[LINE_IBAN]
    if not iban:
        return ParseOutcome.failure("Invalid EPC format: missing IBAN")

    amount = None
    amount_line = _line(lines, LINE_AMOUNT)
    if amount_line:
        amount = _parse_amount(amount_line)
        if amount is None:
            logger.debug("Ignoring malformed amount line %r", amount_line)

    reference = _line(lines, LINE_STRUCTURED_REF) or _line(lines, LINE_UNSTRUCTURED_REF)

    data = PaymentRecord(
        recipient=recipient,
        iban=iban,
        bic=lines[LINE_BIC] or None,
        amount=amount,
        reference=reference or None,
        message=_line(lines, LINE_MESSAGE) or None,
    )
    return ParseOutcome.success(data, version=version, encoding=encoding)


def is_epc_qr(qr_string: str) -> bool:
    """Быстрая проверка: похожа ли строка на EPC QR (BCD / версия / SCT)."""
    if not isinstance(qr_string, str) or not qr_string:
        return False
    lines = qr_string.split("\n")
    if len(lines) <= LINE_SCT_ID:
        return False
    return (
        lines[LINE_SERVICE_TAG] == SERVICE_TAG
        and lines[LINE_VERSION] in VERSIONS
        and lines[LINE_SCT_ID] == SCT_ID
    )


def parse_all_epc_qr_contents(qr_strings: Iterable[str]) -> List[PaymentRecord]:
    """Парсит список строк (содержимое нескольких QR). Убирает дубликаты по (iban, reference, amount)."""
    seen = set()
    payments: List[PaymentRecord] = []
    for s in qr_strings:
        outcome = parse(s)
        if not outcome.valid:
            logger.debug("Skipping QR content: %s", outcome.error)
            continue
        p = outcome.data
        key = (p.iban, p.reference, p.amount)
        if key in seen:
            continue
        seen.add(key)
        payments.append(p)
    return payments
