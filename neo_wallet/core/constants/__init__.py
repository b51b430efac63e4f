from neo_wallet.core.constants.base import (
    ADAPTER_WALLET,
    DEFAULT_HTTP_TIMEOUT,
    SCRIPT_HASH_PREFIX,
)
from neo_wallet.core.constants.networks import (
    NEON_DB_API_URLS,
    NEON_DB_MAINNET,
    NEON_DB_TESTNET,
    NETWORK_MAINNET,
    NETWORK_TESTNET,
    NETWORK_TO_NEON_DB,
)

__all__ = [
    "ADAPTER_WALLET",
    "DEFAULT_HTTP_TIMEOUT",
    "SCRIPT_HASH_PREFIX",
    "NEON_DB_API_URLS",
    "NEON_DB_MAINNET",
    "NEON_DB_TESTNET",
    "NETWORK_MAINNET",
    "NETWORK_TESTNET",
    "NETWORK_TO_NEON_DB",
]
