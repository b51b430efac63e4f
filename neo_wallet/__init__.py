__version__ = "0.1.0"

from neo_wallet.adapters.wallet_adapter import WalletAdapter
from neo_wallet.core import (
    AssetAmounts,
    BaseAdapter,
    StatusTuple,
    UnsupportedOperationError,
    WalletConfig,
)

Wallet = WalletAdapter

__all__ = [
    "__version__",
    "AssetAmounts",
    "BaseAdapter",
    "StatusTuple",
    "UnsupportedOperationError",
    "Wallet",
    "WalletAdapter",
    "WalletConfig",
]
