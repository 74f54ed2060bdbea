import pytest

from main import main

IBAN = "DE89370400440532013000"


def test_generate_prints_payload(capsys):
    """generate prints the payload on stdout."""
    assert main(["generate", "--recipient", "Test", "--iban", IBAN, "--amount", "12.5"]) == 0
    out = capsys.readouterr().out
    assert out == "BCD\n002\n1\nSCT\n\nTest\nDE89370400440532013000\nEUR12.50\n"


def test_generate_with_options_and_png(tmp_path, capsys):
    """generate honours version/encoding and writes a PNG."""
    png = tmp_path / "qr.png"
    rc = main([
        "generate", "--recipient", "Test", "--iban", IBAN,
        "--version", "001", "--encoding", "ISO-8859-1", "-o", str(png),
    ])
    assert rc == 0
    assert capsys.readouterr().out.split("\n")[1:3] == ["001", "2"]
    assert png.read_bytes().startswith(b"\x89PNG")


def test_generate_uses_environment_defaults(monkeypatch, capsys):
    """EPC_VERSION changes the default version."""
    monkeypatch.setenv("EPC_VERSION", "001")
    assert main(["generate", "--recipient", "Test", "--iban", IBAN]) == 0
    assert capsys.readouterr().out.split("\n")[1] == "001"


def test_generate_invalid_record(capsys):
    """Validation errors are reported on stderr with exit code 1."""
    assert main(["generate", "--recipient", "Test", "--iban", "INVALID"]) == 1
    err = capsys.readouterr().err
    assert "IBAN_INVALID_FORMAT" in err


def test_generate_png_charset_error_prints_nothing(tmp_path, capsys):
    """A payload that does not fit ISO-8859-1 fails before anything is printed."""
    png = tmp_path / "qr.png"
    rc = main([
        "generate", "--recipient", "Café €", "--iban", IBAN,
        "--encoding", "ISO-8859-1", "-o", str(png),
    ])
    assert rc == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")
    assert not png.exists()


def test_parse_file(tmp_path, capsys):
    """parse reads a payload file, a final newline is allowed."""
    src = tmp_path / "payload.txt"
    src.write_text("BCD\n002\n1\nSCT\nCOBADEFF\nTest\n" + IBAN + "\nEUR7.00\n\n\nINV-9\n", encoding="utf-8")
    assert main(["parse", str(src)]) == 0
    out = capsys.readouterr().out
    assert "Recipient: Test" in out
    assert "IBAN:      DE89 3704 0044 0532 0130 00" in out
    assert "BIC:       COBADEFF" in out
    assert "Amount:    7.00 EUR" in out
    assert "Reference: INV-9" in out


def test_parse_stdin_invalid(monkeypatch, capsys):
    """Invalid payloads on stdin give exit code 1."""
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("hello world\n"))
    assert main(["parse"]) == 1
    assert "insufficient data" in capsys.readouterr().err


def test_parse_missing_file(tmp_path, capsys):
    """A missing input file is an error, not a traceback."""
    assert main(["parse", str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_validate_lists_all_errors(capsys):
    """validate prints every problem."""
    rc = main(["validate", "--recipient", " ", "--iban", "INVALID", "--amount", "-50"])
    assert rc == 1
    err = capsys.readouterr().err
    assert "RECIPIENT_REQUIRED" in err
    assert "IBAN_INVALID_FORMAT" in err
    assert "AMOUNT_INVALID" in err


def test_validate_ok(capsys):
    """A valid payment prints OK."""
    assert main(["validate", "--recipient", "Test", "--iban", IBAN, "--bic", "COBADEFFXXX"]) == 0
    assert capsys.readouterr().out.strip() == "OK"


def test_format_iban(capsys):
    """format-iban prints groups of four."""
    assert main(["format-iban", "de89370400440532013000"]) == 0
    assert capsys.readouterr().out.strip() == "DE89 3704 0044 0532 0130 00"


def test_bad_configuration(monkeypatch, capsys):
    """Invalid configuration stops before parsing arguments."""
    monkeypatch.setenv("EPC_ENCODING", "UTF-16")
    assert main(["format-iban", IBAN]) == 1
    assert "EPC_ENCODING" in capsys.readouterr().err


def test_missing_command():
    """A command is required."""
    with pytest.raises(SystemExit):
        main([])
