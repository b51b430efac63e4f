from __future__ import annotations

from collections.abc import Awaitable, Callable
from decimal import Decimal
from typing import Any, Protocol

# Called by the SDK with the unsigned transaction and the signer's public key;
# returns the signed transaction.
SigningFunction = Callable[[Any, str], Awaitable[Any] | Any]


class NeonDBClientProtocol(Protocol):
    async def get_balance(self, net: str, address: str) -> Any: ...

    async def get_claims(self, net: str, address: str) -> Any: ...

    async def get_transaction_history(self, net: str, address: str) -> Any: ...

    async def get_rpc_endpoint(self, net: str) -> str: ...

    async def do_send_asset(
        self,
        net: str,
        to_address: str,
        from_key: str,
        asset_amounts: Any,
        signing_function: SigningFunction | None = None,
    ) -> Any: ...

    async def do_claim_all_gas(
        self,
        net: str,
        private_key: str,
        signing_function: SigningFunction | None = None,
    ) -> Any: ...

    async def do_mint_tokens(
        self,
        net: str,
        script_hash: str,
        from_wif: str,
        neo: float,
        gas_cost: float,
        signing_function: SigningFunction | None = None,
    ) -> Any: ...


class Nep5ClientProtocol(Protocol):
    async def get_token_balance(
        self, endpoint: str, script_hash: str, address: str
    ) -> Decimal | float | int: ...

    async def do_transfer_token(
        self,
        net: str,
        script_hash: str,
        from_wif: str,
        to_address: str,
        amount: float,
        gas_cost: float = 0,
        signing_function: SigningFunction | None = None,
    ) -> Any: ...
