#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
EPC QR (GiroCode): формирование, разбор и проверка платёжных строк SEPA
из командной строки.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from epc_config import get_config
from epc_constants import ENCODINGS, VERSIONS
from epc_errors import EpcError
from epc_qr import generate, payload_to_qr_image
from epc_qr_decode import parse
from epc_types import GenerateOptions, PaymentRecord
from epc_validate import format_iban, validate

logger = logging.getLogger(__name__)


def _add_record_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--recipient", required=True, help="Beneficiary name (max 70 chars)")
    parser.add_argument("--iban", required=True, help="Beneficiary IBAN (spaces allowed)")
    parser.add_argument("--bic", default=None, help="Beneficiary BIC (8 or 11 chars)")
    parser.add_argument("--amount", type=float, default=None, help="Amount in EUR")
    parser.add_argument("--reference", default=None, help="RF creditor reference or free text (max 35 chars)")
    parser.add_argument("--message", default=None, help="Remittance message (max 140 chars)")


def _record_from_args(args: argparse.Namespace) -> PaymentRecord:
    return PaymentRecord(
        recipient=args.recipient,
        iban=args.iban,
        bic=args.bic,
        amount=args.amount,
        reference=args.reference,
        message=args.message,
    )


def build_parser(config: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build, parse and validate EPC QR (GiroCode) payloads for SEPA credit transfers."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_gen = sub.add_parser("generate", help="Print the EPC payload for a payment")
    _add_record_arguments(p_gen)
    p_gen.add_argument("--version", dest="epc_version", choices=VERSIONS, default=config["version"])
    p_gen.add_argument("--encoding", choices=list(ENCODINGS), default=config["encoding"])
    p_gen.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Also write the QR code as PNG to this file",
    )

    p_parse = sub.add_parser("parse", help="Parse an EPC payload")
    p_parse.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File with the payload (default: stdin)",
    )

    p_val = sub.add_parser("validate", help="Check a payment and list every problem")
    _add_record_arguments(p_val)

    p_fmt = sub.add_parser("format-iban", help="Print an IBAN in groups of four")
    p_fmt.add_argument("iban")
    return parser


def _read_payload(source: str) -> str:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    # Scanners and editors add a final newline that is not part of the payload
    return text[:-1] if text.endswith("\n") else text


def _cmd_generate(args: argparse.Namespace, config: dict) -> int:
    options = GenerateOptions(version=args.epc_version, encoding=args.encoding)
    payload = generate(_record_from_args(args), options)
    # Render first: the payload may not fit the declared charset
    png = None
    if args.output is not None:
        png = payload_to_qr_image(
            payload, box_size=config["qr_box_size"], border=config["qr_border"]
        )
    print(payload)
    if png is not None:
        args.output.write_bytes(png)
        print(f"Written: {args.output}", file=sys.stderr)
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    outcome = parse(_read_payload(args.input))
    if not outcome.valid:
        print(f"Error: {outcome.error}", file=sys.stderr)
        return 1
    p = outcome.data
    print(f"Version:   {outcome.version} ({outcome.encoding})")
    print(f"Recipient: {p.recipient}")
    print(f"IBAN:      {format_iban(p.iban)}")
    if p.bic:
        print(f"BIC:       {p.bic}")
    if p.amount is not None:
        print(f"Amount:    {p.amount:.2f} EUR")
    if p.reference:
        print(f"Reference: {p.reference}")
    if p.message:
        print(f"Message:   {p.message}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    report = validate(_record_from_args(args))
    if report.valid:
        print("OK")
        return 0
    for e in report.errors:
        print(f"{e.field}: {e.message} ({e.code.value})", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = get_config()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config["log_level"]),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    args = build_parser(config).parse_args(argv)
    logger.debug("Command: %s", args.command)

    try:
        if args.command == "generate":
            return _cmd_generate(args, config)
        if args.command == "parse":
            return _cmd_parse(args)
        if args.command == "validate":
            return _cmd_validate(args)
        print(format_iban(args.iban))
        return 0
    except EpcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
