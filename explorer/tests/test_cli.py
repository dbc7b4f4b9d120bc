"""Tests for the CLI."""

import json

import pytest

from explorer.cli import main


@pytest.fixture
def address_file(tmp_path):
    """Verified contract address document."""
    path = tmp_path / "address.json"
    path.write_text(json.dumps({
        "hash": "0x8bf38d4764929064f2d4d3a56520a76ab3df415b",
        "fetched_balance": 10_000_000_000_000,
        "fetched_balance_block_number": 1_000_000,
        "contract_code": "0x6080604052",
        "smart_contract": {
            "name": "SimpleStorage",
            "abi": [
                {
                    "constant": True,
                    "inputs": [],
                    "name": "get",
                    "outputs": [{"name": "", "type": "uint256"}],
                    "stateMutability": "view",
                    "type": "function",
                },
            ],
        },
        "names": [
            {"name": "POA Wallet"},
            {"name": "POA Foundation Wallet", "primary": True},
        ],
    }))
    return path


@pytest.fixture(autouse=True)
def default_env(monkeypatch):
    """Run with default settings."""
    for name in ["COIN_SYMBOL", "NATIVE_DECIMALS", "USD_DECIMAL_PLACES", "QR_SCALE",
                 "QR_BORDER", "QR_ERROR_LEVEL", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


def test_show(address_file, capsys):
    """All derived values are printed."""
    main(["show", str(address_file), "--usd-value", "0.5"])
    out = capsys.readouterr().out

    assert "title: Contract Address" in out
    assert "hash: 0x8bf38d4764929064f2d4d3a56520a76ab3df415b" in out
    assert "name: POA Foundation Wallet" in out
    assert "balance: 0.00001 POA" in out
    assert "balance_usd: $0.000005 USD" in out
    assert "balance_block: 1000000" in out
    assert "verified: True" in out
    assert "read_only_functions: True" in out
    assert "0x6d4ce63c get()" in out


def test_show_without_rate(address_file, capsys):
    """Missing rate leaves the USD value empty."""
    main(["show", str(address_file)])
    out = capsys.readouterr().out
    assert "balance_usd: \n" in out


def test_show_writes_qr_code(address_file, tmp_path):
    """QR code PNG is written to the requested file."""
    qr_path = tmp_path / "qr.png"
    main(["show", str(address_file), "--qr-output", str(qr_path)])
    assert qr_path.read_bytes().startswith(b"\x89PNG")


def test_show_missing_file(tmp_path, capsys):
    """Missing documents exit with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        main(["show", str(tmp_path / "missing.json")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_show_invalid_document(tmp_path, capsys):
    """Invalid documents exit with status 1."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"hash": "0x8bf3", "fetched_balance": -5}))
    with pytest.raises(SystemExit) as exc_info:
        main(["show", str(path)])
    assert exc_info.value.code == 1
    assert "Error" in capsys.readouterr().err


def test_read_functions(tmp_path, capsys):
    """Read-only functions of an ABI are listed."""
    abi_path = tmp_path / "abi.json"
    abi_path.write_text(json.dumps([
        {"name": "set", "inputs": [{"name": "x", "type": "uint256"}], "stateMutability": "nonpayable"},
        {"name": "get", "inputs": [], "stateMutability": "view"},
    ]))
    main(["read-functions", str(abi_path)])
    assert capsys.readouterr().out.strip() == "0x6d4ce63c get()"


def test_read_functions_json(tmp_path, capsys):
    """JSON output uses ABI key names."""
    abi_path = tmp_path / "abi.json"
    abi_path.write_text(json.dumps([{"name": "get", "inputs": [], "stateMutability": "pure"}]))
    main(["read-functions", str(abi_path), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data[0]["name"] == "get"
    assert data[0]["stateMutability"] == "pure"


def test_read_functions_invalid_abi(tmp_path):
    """Invalid ABI exits with status 1."""
    abi_path = tmp_path / "abi.json"
    abi_path.write_text(json.dumps({"not": "a list"}))
    with pytest.raises(SystemExit) as exc_info:
        main(["read-functions", str(abi_path)])
    assert exc_info.value.code == 1


def test_no_command():
    """No command prints help and exits 1."""
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
