# -*- coding: utf-8 -*-
"""
Configuration from environment variables (defaults for the command line tool).
"""
import os

from epc_constants import DEFAULT_ENCODING, DEFAULT_VERSION, ENCODINGS, VERSIONS

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    v = _env(name, str(default))
    try:
        n = int(v)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {v!r}") from None
    if n < 0:
        raise RuntimeError(f"{name} must not be negative, got {n}")
    return n


def get_config() -> dict:
    config = {
        "version": _env("EPC_VERSION", DEFAULT_VERSION),
        "encoding": _env("EPC_ENCODING", DEFAULT_ENCODING).upper(),
        "qr_box_size": _env_int("EPC_QR_BOX_SIZE", 6),
        "qr_border": _env_int("EPC_QR_BORDER", 2),
        "log_level": _env("EPC_LOG_LEVEL", "WARNING").upper(),
    }
    if config["version"] not in VERSIONS:
        raise RuntimeError(f"Unsupported EPC_VERSION: {config['version']}")
    if config["encoding"] not in ENCODINGS:
        raise RuntimeError(f"Unsupported EPC_ENCODING: {config['encoding']}")
    if config["log_level"] not in _LOG_LEVELS:
        raise RuntimeError(f"Unsupported EPC_LOG_LEVEL: {config['log_level']}")
    if config["qr_box_size"] == 0:
        raise RuntimeError("EPC_QR_BOX_SIZE must be at least 1")
    return config
