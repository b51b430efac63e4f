"""Tests for the neo-wallet CLI commands."""

from __future__ import annotations

import json
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from neo_wallet.cli import cli


def _make_mock_wallet(**results):
    """Create a mock WalletAdapter usable as an async context manager."""
    wallet = MagicMock()
    wallet.__aenter__ = AsyncMock(return_value=wallet)
    wallet.__aexit__ = AsyncMock(return_value=None)
    for name, value in results.items():
        setattr(wallet, name, AsyncMock(return_value=value))
    return wallet


def test_balance_prints_ok_result():
    wallet = _make_mock_wallet(get_balance=(True, {"NEO": {"balance": 10}}))
    with patch("neo_wallet.cli.WalletAdapter", return_value=wallet) as factory:
        result = CliRunner().invoke(cli, ["--network", "testnet", "balance", "addrX"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "ok": True,
        "result": {"NEO": {"balance": 10}},
    }
    wallet.get_balance.assert_awaited_once_with("addrX")
    assert factory.call_args.kwargs == {"network": "testnet", "neon_db_net": ""}


def test_failure_prints_error_and_exits_nonzero():
    wallet = _make_mock_wallet(get_claims=(False, "connection refused"))
    with patch("neo_wallet.cli.WalletAdapter", return_value=wallet):
        result = CliRunner().invoke(cli, ["claims", "addrX"])

    assert result.exit_code == 1
    assert json.loads(result.output) == {"ok": False, "error": "connection refused"}


def test_history_command():
    wallet = _make_mock_wallet(get_transaction_history=(True, []))
    with patch("neo_wallet.cli.WalletAdapter", return_value=wallet):
        result = CliRunner().invoke(cli, ["history", "addrX"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"ok": True, "result": []}


def test_token_balance_serializes_decimal():
    wallet = _make_mock_wallet(get_token_balance=(True, Decimal("1.50")))
    with patch("neo_wallet.cli.WalletAdapter", return_value=wallet):
        result = CliRunner().invoke(
            cli,
            ["--neon-db-net", "MainNet", "token-balance", "0xabc", "addrX"],
        )

    assert result.exit_code == 0
    assert json.loads(result.output) == {"ok": True, "result": "1.50"}
    wallet.get_token_balance.assert_awaited_once_with("0xabc", "addrX")


def test_config_option_requires_existing_file(tmp_path):
    result = CliRunner().invoke(
        cli, ["--config", str(tmp_path / "missing.json"), "balance", "addrX"]
    )

    assert result.exit_code == 2
    assert "does not exist" in result.output
