from neo_wallet.core.adapters.BaseAdapter import (
    BaseAdapter,
    StatusTuple,
    UnsupportedOperationError,
)
from neo_wallet.core.adapters.models import AssetAmounts, WalletConfig

__all__ = [
    "AssetAmounts",
    "BaseAdapter",
    "StatusTuple",
    "UnsupportedOperationError",
    "WalletConfig",
]
