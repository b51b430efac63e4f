from __future__ import annotations

from neo_wallet.core.constants.base import SCRIPT_HASH_PREFIX


def _has_prefix(script_hash: str) -> bool:
    return script_hash[: len(SCRIPT_HASH_PREFIX)].lower() == SCRIPT_HASH_PREFIX


def normalize(script_hash: str) -> str:
    """Return ``script_hash`` with a leading lowercase ``0x``."""
    return f"{SCRIPT_HASH_PREFIX}{denormalize(script_hash)}"


def denormalize(script_hash: str) -> str:
    """Return ``script_hash`` without its ``0x`` prefix, as the chain API expects."""
    if _has_prefix(script_hash):
        return script_hash[len(SCRIPT_HASH_PREFIX) :]
    return script_hash
