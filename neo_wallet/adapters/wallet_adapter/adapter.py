from __future__ import annotations

import asyncio
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from neo_wallet.core.adapters.BaseAdapter import BaseAdapter, delegate
from neo_wallet.core.adapters.decorators import status_tuple
from neo_wallet.core.adapters.models import (
    AssetAmounts,
    WalletConfig,
    asset_amounts_payload,
)
from neo_wallet.core.clients.NeonDBClient import NeonDBClient
from neo_wallet.core.clients.Nep5Client import Nep5Client
from neo_wallet.core.clients.protocols import (
    NeonDBClientProtocol,
    Nep5ClientProtocol,
    SigningFunction,
)
from neo_wallet.core.config import get_wallet_config
from neo_wallet.core.constants.base import ADAPTER_WALLET
from neo_wallet.core.utils.script_hash import denormalize


class WalletAdapter(BaseAdapter):
    """Wallet facade over the neonDB and NEP5 chain clients.

    Every operation returns ``(True, result)`` with the client's value untouched,
    or ``(False, error)`` after logging the failure once.
    """

    adapter_type = ADAPTER_WALLET

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        *,
        network: Any = None,
        neon_db_net: str = "",
        logger: Any | None = None,
        neon_db: NeonDBClientProtocol | None = None,
        nep5: Nep5ClientProtocol | None = None,
    ):
        super().__init__(
            "wallet",
            config if config is not None else get_wallet_config(),
            logger=logger,
        )
        self.wallet_config = WalletConfig(
            network=network if network is not None else self.config.get("network"),
            neon_db_net=neon_db_net or self.config.get("neon_db_net") or "",
        )
        self._owned_clients: list[Any] = []
        if neon_db is None:
            neon_db = NeonDBClient()
            self._owned_clients.append(neon_db)
        if nep5 is None:
            nep5 = Nep5Client()
            self._owned_clients.append(nep5)
        self.neon_db = neon_db
        self.nep5 = nep5

    @property
    def network(self) -> Any:
        return self.wallet_config.network

    @property
    def neon_db_net(self) -> str:
        return self.wallet_config.neon_db_net

    async def close(self) -> None:
        results = await asyncio.gather(
            *(client.close() for client in self._owned_clients),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                raise result

    @status_tuple("get_balance")
    async def get_balance(self, address: str) -> Any:
        return await delegate(self.neon_db, "get_balance")(self.neon_db_net, address)

    @status_tuple("get_claims")
    async def get_claims(self, address: str) -> Any:
        return await delegate(self.neon_db, "get_claims")(self.neon_db_net, address)

    @status_tuple("transaction_history")
    async def get_transaction_history(self, address: str) -> Any:
        return await delegate(self.neon_db, "get_transaction_history")(
            self.neon_db_net, address
        )

    @status_tuple("get_token_balance")
    async def get_token_balance(
        self, script_hash: str, address: str
    ) -> Decimal | float | int:
        endpoint = await delegate(self.neon_db, "get_rpc_endpoint")(self.neon_db_net)
        return await delegate(self.nep5, "get_token_balance")(
            endpoint, denormalize(script_hash), address
        )

    @status_tuple("send_asset")
    async def do_send_asset(
        self,
        to_address: str,
        from_key: str,
        asset_amounts: AssetAmounts | Mapping[str, Any] | None,
        signing_function: SigningFunction | None = None,
    ) -> Any:
        return await delegate(self.neon_db, "do_send_asset")(
            self.neon_db_net,
            to_address,
            from_key,
            asset_amounts_payload(asset_amounts),
            signing_function,
        )

    @status_tuple("claim_all_gas")
    async def do_claim_all_gas(
        self,
        private_key: str,
        signing_function: SigningFunction | None = None,
    ) -> Any:
        return await delegate(self.neon_db, "do_claim_all_gas")(
            self.neon_db_net, private_key, signing_function
        )

    @status_tuple("mint_tokens")
    async def do_mint_tokens(
        self,
        script_hash: str,
        from_wif: str,
        neo: float,
        gas_cost: float,
        signing_function: SigningFunction | None = None,
    ) -> Any:
        return await delegate(self.neon_db, "do_mint_tokens")(
            self.neon_db_net,
            denormalize(script_hash),
            from_wif,
            neo,
            gas_cost,
            signing_function,
        )

    @status_tuple("do_transfer_token")
    async def do_transfer_token(
        self,
        script_hash: str,
        from_wif: str,
        to_address: str,
        transfer_amount: float,
        gas_cost: float = 0,
        signing_function: SigningFunction | None = None,
    ) -> Any:
        return await delegate(self.nep5, "do_transfer_token")(
            self.neon_db_net,
            denormalize(script_hash),
            from_wif,
            to_address,
            transfer_amount,
            gas_cost,
            signing_function,
        )
