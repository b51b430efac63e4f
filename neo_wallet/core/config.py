import json
import os
from pathlib import Path
from typing import Any

from neo_wallet.core.constants.base import DEFAULT_HTTP_TIMEOUT
from neo_wallet.core.constants.networks import NEON_DB_API_URLS

_CONFIG_ENV_KEYS = ("NEO_WALLET_CONFIG_PATH", "NEO_WALLET_CONFIG")
_DEFAULT_CONFIG_FILENAME = "config.json"
_WALLET_SECTION = "wallet"


def _find_project_root(start: Path) -> Path | None:
    cur = start.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _project_root() -> Path | None:
    return _find_project_root(Path.cwd()) or _find_project_root(Path(__file__).parent)


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()

    env_path = next(
        (os.getenv(k, "").strip() for k in _CONFIG_ENV_KEYS if os.getenv(k)), ""
    )
    if env_path:
        p = Path(env_path).expanduser()
        if p.is_absolute():
            return p
        root = _project_root()
        return (root / p) if root else p

    root = _project_root()
    return (root / _DEFAULT_CONFIG_FILENAME) if root else Path(_DEFAULT_CONFIG_FILENAME)


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    try:
        parsed = json.loads(cfg_path.read_text())
    except json.JSONDecodeError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


CONFIG: dict[str, Any] = load_config_json()


def set_config(config: dict[str, Any]) -> None:
    """Replace the global CONFIG dict in-place.

    This allows code that imported CONFIG at module import time to see updates.
    """
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    """Load config from disk into the global CONFIG dict."""
    set_config(load_config_json(path, require_exists=require_exists))


def get_wallet_config() -> dict[str, Any]:
    section = CONFIG.get(_WALLET_SECTION, {})
    return dict(section) if isinstance(section, dict) else {}


def get_neon_db_api_urls() -> dict[str, str]:
    urls = dict(NEON_DB_API_URLS)
    overrides = get_wallet_config().get("neon_db_api_urls")
    if isinstance(overrides, dict):
        urls.update({str(k): str(v).strip() for k, v in overrides.items() if v})
    return urls


def get_http_timeout() -> float:
    value = get_wallet_config().get("http_timeout")
    if value is None:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(value)
    except (TypeError, ValueError):
        return DEFAULT_HTTP_TIMEOUT
