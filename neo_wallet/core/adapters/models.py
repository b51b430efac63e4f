from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from neo_wallet.core.constants.networks import NETWORK_TO_NEON_DB


class WalletConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # A named environment ("mainnet", "testnet") or any opaque network object.
    network: Any = None
    neon_db_net: str = ""

    @model_validator(mode="before")
    @classmethod
    def _resolve_neon_db_net(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("neon_db_net"):
            return data
        network = data.get("network")
        resolved = NETWORK_TO_NEON_DB.get(network) if isinstance(network, str) else None
        return {**data, "neon_db_net": resolved or ""}


class AssetAmounts(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    neo: float = Field(default=0, alias="NEO", ge=0)
    gas: float = Field(default=0, alias="GAS", ge=0)

    def to_payload(self) -> dict[str, float]:
        return self.model_dump(by_alias=True)


def asset_amounts_payload(amounts: AssetAmounts | Mapping[str, Any] | None) -> Any:
    if amounts is None:
        return AssetAmounts().to_payload()
    if isinstance(amounts, AssetAmounts):
        return amounts.to_payload()
    return amounts
