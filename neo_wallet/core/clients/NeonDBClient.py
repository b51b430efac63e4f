from __future__ import annotations

from typing import Any

from neo_wallet.core.clients.NeoHttpClient import NeoHttpClient
from neo_wallet.core.config import get_neon_db_api_urls


def get_api_endpoint(net: str) -> str:
    """Resolve a neonDB network id (``MainNet``, ``TestNet`` or a URL) to its API base."""
    if not net:
        raise ValueError("neonDB network is not configured")
    if net.startswith(("http://", "https://")):
        return net.rstrip("/")
    urls = get_neon_db_api_urls()
    if net not in urls:
        raise ValueError(f"Unknown neonDB network: {net}")
    return urls[net].rstrip("/")


class NeonDBClient(NeoHttpClient):
    """Read-only client for the neonDB light-wallet API.

    Transaction flows (send asset, claim gas, mint tokens) need a signing-capable
    SDK and are not provided here; see ``NeonDBClientProtocol``.
    """

    async def _get_json(self, net: str, path: str) -> Any:
        url = f"{get_api_endpoint(net)}{path}"
        response = await self._request("GET", url)
        return response.json()

    async def get_balance(self, net: str, address: str) -> dict[str, Any]:
        return await self._get_json(net, f"/v2/address/balance/{address}")

    async def get_claims(self, net: str, address: str) -> dict[str, Any]:
        return await self._get_json(net, f"/v2/address/claims/{address}")

    async def get_transaction_history(
        self, net: str, address: str
    ) -> list[dict[str, Any]]:
        data = await self._get_json(net, f"/v2/address/history/{address}")
        history = data.get("history") if isinstance(data, dict) else None
        if not isinstance(history, list):
            raise ValueError(f"Malformed history response for {address}")
        return history

    async def get_rpc_endpoint(self, net: str) -> str:
        data = await self._get_json(net, "/v2/network/best_node")
        node = data.get("node") if isinstance(data, dict) else None
        if not node:
            raise ValueError("neonDB returned no RPC node")
        return str(node)
