import sys
from pathlib import Path

import pytest

# Flat modules live in the repository root
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from epc_types import PaymentRecord  # noqa: E402

DE_IBAN = "DE89370400440532013000"


@pytest.fixture
def de_iban():
    return DE_IBAN


@pytest.fixture
def full_record():
    """A record with every field populated and a structured reference."""
    return PaymentRecord(
        recipient="Test Company GmbH",
        iban=DE_IBAN,
        bic="COBADEFFXXX",
        amount=1234.56,
        reference="RF18539007547034",
        message="Invoice 2024-001",
    )


@pytest.fixture(autouse=True)
def clean_epc_env(monkeypatch):
    """Keeps EPC_* variables from the developer's shell out of the tests."""
    for name in ("EPC_VERSION", "EPC_ENCODING", "EPC_QR_BOX_SIZE", "EPC_QR_BORDER", "EPC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
