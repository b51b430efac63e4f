from __future__ import annotations

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import click
from loguru import logger

from neo_wallet.adapters.wallet_adapter.adapter import WalletAdapter
from neo_wallet.core.config import get_wallet_config, load_config


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def _run(
    ctx: click.Context,
    call: Callable[[WalletAdapter], Awaitable[tuple[bool, Any]]],
) -> None:
    async def _main() -> tuple[bool, Any]:
        async with WalletAdapter(
            get_wallet_config(),
            network=ctx.obj["network"],
            neon_db_net=ctx.obj["neon_db_net"],
        ) as wallet:
            return await call(wallet)

    ok, result = asyncio.run(_main())
    if ok:
        _echo_json({"ok": True, "result": result})
        return
    _echo_json({"ok": False, "error": result})
    ctx.exit(1)


@click.group(name="neo-wallet", help="Query a NEO wallet through neonDB.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, exists=True),
    default=None,
    help="Path to a config.json (defaults to the project root).",
)
@click.option("--network", default=None, help="mainnet or testnet.")
@click.option(
    "--neon-db-net",
    default="",
    help="Explicit neonDB network id or API URL; overrides --network.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    network: str | None,
    neon_db_net: str,
    log_level: str,
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=str(log_level).upper())
    if config_path:
        load_config(config_path, require_exists=True)
    ctx.ensure_object(dict)
    ctx.obj["network"] = network
    ctx.obj["neon_db_net"] = neon_db_net


@cli.command(name="balance", help="NEO and GAS balance of an address.")
@click.argument("address")
@click.pass_context
def balance_cmd(ctx: click.Context, address: str) -> None:
    _run(ctx, lambda wallet: wallet.get_balance(address))


@cli.command(name="claims", help="Available and unavailable GAS claims.")
@click.argument("address")
@click.pass_context
def claims_cmd(ctx: click.Context, address: str) -> None:
    _run(ctx, lambda wallet: wallet.get_claims(address))


@cli.command(name="history", help="Transaction history of an address.")
@click.argument("address")
@click.pass_context
def history_cmd(ctx: click.Context, address: str) -> None:
    _run(ctx, lambda wallet: wallet.get_transaction_history(address))


@cli.command(name="token-balance", help="NEP5 token balance of an address.")
@click.argument("script_hash")
@click.argument("address")
@click.pass_context
def token_balance_cmd(ctx: click.Context, script_hash: str, address: str) -> None:
    _run(ctx, lambda wallet: wallet.get_token_balance(script_hash, address))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
