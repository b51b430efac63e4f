from neo_wallet.core.adapters.BaseAdapter import (
    BaseAdapter,
    StatusTuple,
    UnsupportedOperationError,
    delegate,
)
from neo_wallet.core.adapters.decorators import status_tuple
from neo_wallet.core.adapters.models import AssetAmounts, WalletConfig

__all__ = [
    "AssetAmounts",
    "BaseAdapter",
    "StatusTuple",
    "UnsupportedOperationError",
    "WalletConfig",
    "delegate",
    "status_tuple",
]
