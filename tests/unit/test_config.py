import pytest

from epc_config import get_config


def test_defaults():
    """Without environment variables the defaults apply."""
    assert get_config() == {
        "version": "002",
        "encoding": "UTF-8",
        "qr_box_size": 6,
        "qr_border": 2,
        "log_level": "WARNING",
    }


def test_environment_overrides(monkeypatch):
    """EPC_* variables override the defaults."""
    monkeypatch.setenv("EPC_VERSION", "001")
    monkeypatch.setenv("EPC_ENCODING", "iso-8859-1")
    monkeypatch.setenv("EPC_QR_BOX_SIZE", "10")
    monkeypatch.setenv("EPC_QR_BORDER", "0")
    monkeypatch.setenv("EPC_LOG_LEVEL", "debug")
    config = get_config()
    assert config["version"] == "001"
    assert config["encoding"] == "ISO-8859-1"
    assert config["qr_box_size"] == 10
    assert config["qr_border"] == 0
    assert config["log_level"] == "DEBUG"


def test_blank_variable_uses_default(monkeypatch):
    """An empty variable counts as unset."""
    monkeypatch.setenv("EPC_VERSION", "  ")
    assert get_config()["version"] == "002"


@pytest.mark.parametrize("name,value", [
    ("EPC_VERSION", "003"),
    ("EPC_ENCODING", "UTF-16"),
    ("EPC_LOG_LEVEL", "LOUD"),
    ("EPC_QR_BOX_SIZE", "big"),
    ("EPC_QR_BOX_SIZE", "0"),
    ("EPC_QR_BORDER", "-1"),
])
def test_invalid_values(monkeypatch, name, value):
    """Unsupported values raise RuntimeError naming the variable."""
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError, match=name):
        get_config()


def test_integer_error_is_not_chained(monkeypatch):
    """The RuntimeError for a non-integer hides the int() ValueError."""
    monkeypatch.setenv("EPC_QR_BORDER", "wide")
    with pytest.raises(RuntimeError) as exc_info:
        get_config()
    assert exc_info.value.__cause__ is None
    assert exc_info.value.__suppress_context__
