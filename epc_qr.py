# -*- coding: utf-8 -*-
"""
Формирование EPC QR-кода для SEPA Credit Transfer (Revolut, N26, bunq и др.).
Спецификация: EPC069-12 Quick Response Code Guidelines.
"""
import io
import logging
from typing import Optional

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from epc_constants import (
    CURRENCY,
    ENCODING_NAMES,
    ENCODINGS,
    LINE_ENCODING,
    SCT_ID,
    SERVICE_TAG,
    STRUCTURED_REF_PREFIX,
    VERSIONS,
    clean_string,
)
from epc_errors import EpcError
from epc_types import GenerateOptions, PaymentRecord
from epc_validate import validate

logger = logging.getLogger(__name__)


def generate(record: PaymentRecord, options: Optional[GenerateOptions] = None) -> str:
    """
    Собирает строку для QR-кода в формате EPC (BCD).
    Разделитель — перевод строки (LF). Пустые хвостовые строки не выводятся.
    Raises EpcError with the first validation error of the record.
    """
    report = validate(record)
    if not report.valid:
        first = report.errors[0]
        logger.debug("EPC payload rejected: %s (%d error(s))", first.code.value, len(report.errors))
        raise EpcError(first.message, first.code, first.field)

    options = options or GenerateOptions()
    if options.version not in VERSIONS:
        raise ValueError(f"Unsupported EPC version: {options.version!r}")
    encoding_code = ENCODINGS.get(options.encoding.upper())
    if encoding_code is None:
        raise ValueError(f"Unsupported EPC encoding: {options.encoding!r}")

    amount = ""
    if record.amount is not None:
        # Для совместимости с Revolut используем точку в сумме; abs() убирает "-0.00"
        amount = f"{CURRENCY}{abs(record.amount):.2f}"

    # Remittance: структурированная (RF) или неструктурированная
    reference = record.reference or ""
    structured = reference.upper().startswith(STRUCTURED_REF_PREFIX)

    parts = [
        SERVICE_TAG,
        options.version,
        encoding_code,
        SCT_ID,
        clean_string(record.bic),
        record.recipient.strip(),
        clean_string(record.iban),
        amount,
        "",  # purpose code
        reference if structured else "",
        "" if structured else reference,
        record.message or "",
    ]
    # Убираем пустые хвосты (последний элемент без разделителя не должен быть пустым)
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return "\n".join(parts)


def payload_to_qr_image(payload: str, box_size: int = 6, border: int = 2) -> bytes:
    """Генерирует PNG-изображение QR-кода. Возвращает bytes (PNG)."""
    lines = payload.split("\n")
    code = lines[LINE_ENCODING] if len(lines) > LINE_ENCODING else ""
    charset = ENCODING_NAMES.get(code, "UTF-8")

    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload.encode(charset))
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
