from neo_wallet.core.clients.NeoHttpClient import NeoHttpClient
from neo_wallet.core.clients.NeonDBClient import NeonDBClient, get_api_endpoint
from neo_wallet.core.clients.Nep5Client import (
    JsonRpcError,
    Nep5Client,
    address_to_script_hash,
)
from neo_wallet.core.clients.protocols import (
    NeonDBClientProtocol,
    Nep5ClientProtocol,
    SigningFunction,
)

__all__ = [
    "JsonRpcError",
    "NeoHttpClient",
    "NeonDBClient",
    "NeonDBClientProtocol",
    "Nep5Client",
    "Nep5ClientProtocol",
    "SigningFunction",
    "address_to_script_hash",
    "get_api_endpoint",
]
