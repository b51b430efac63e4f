from __future__ import annotations

from decimal import Decimal
from typing import Any

import base58

from neo_wallet.core.clients.NeoHttpClient import NeoHttpClient
from neo_wallet.core.constants.base import JSONRPC_REQUEST_ID, JSONRPC_VERSION
from neo_wallet.core.constants.networks import ADDRESS_VERSION, SCRIPT_HASH_BYTES


class JsonRpcError(RuntimeError):
    def __init__(self, code: int | None, message: str):
        self.code = code
        super().__init__(f"JSON-RPC error {code}: {message}")


def address_to_script_hash(address: str) -> str:
    """Return the big-endian hex script hash encoded in a NEO address."""
    try:
        payload = base58.b58decode_check(address)
    except ValueError as exc:
        raise ValueError(f"Invalid NEO address: {address}") from exc
    if len(payload) != SCRIPT_HASH_BYTES + 1 or payload[0] != ADDRESS_VERSION:
        raise ValueError(f"Invalid NEO address: {address}")
    return payload[1:][::-1].hex()


def stack_item_to_int(item: dict[str, Any]) -> int:
    kind = item.get("type")
    value = item.get("value")
    if kind == "Integer":
        return int(value)
    if kind == "ByteArray":
        if not value:
            return 0
        return int.from_bytes(bytes.fromhex(value), "little", signed=True)
    raise ValueError(f"Unexpected stack item type: {kind}")


class Nep5Client(NeoHttpClient):
    """Read-only NEP5 client talking JSON-RPC to a NEO node.

    Token transfers need a signing-capable SDK; see ``Nep5ClientProtocol``.
    """

    async def _rpc(self, endpoint: str, method: str, params: list[Any]) -> Any:
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": JSONRPC_REQUEST_ID,
            "method": method,
            "params": params,
        }
        response = await self._request("POST", endpoint, json=payload)
        data = response.json()
        error = data.get("error")
        if error:
            raise JsonRpcError(error.get("code"), str(error.get("message")))
        return data.get("result")

    async def invoke_function(
        self,
        endpoint: str,
        script_hash: str,
        operation: str,
        args: list[dict[str, Any]] | None = None,
    ) -> int:
        result = await self._rpc(
            endpoint, "invokefunction", [script_hash, operation, args or []]
        )
        if not isinstance(result, dict):
            raise ValueError(f"Malformed invokefunction result for {operation}")
        if "FAULT" in str(result.get("state", "")):
            raise RuntimeError(f"{operation} on {script_hash} faulted")
        stack = result.get("stack") or []
        if not stack:
            raise ValueError(f"{operation} on {script_hash} returned an empty stack")
        return stack_item_to_int(stack[0])

    async def get_token_balance(
        self, endpoint: str, script_hash: str, address: str
    ) -> Decimal:
        address_hash = address_to_script_hash(address)
        decimals = await self.invoke_function(endpoint, script_hash, "decimals")
        raw = await self.invoke_function(
            endpoint,
            script_hash,
            "balanceOf",
            [{"type": "Hash160", "value": address_hash}],
        )
        return Decimal(raw).scaleb(-decimals)
