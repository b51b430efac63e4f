from neo_wallet.adapters.wallet_adapter.adapter import WalletAdapter

__all__ = ["WalletAdapter"]
