# Timeout constants (seconds)
DEFAULT_HTTP_TIMEOUT = 30.0  # HTTP client timeout

ADAPTER_WALLET = "WALLET"

SCRIPT_HASH_PREFIX = "0x"

JSONRPC_VERSION = "2.0"
JSONRPC_REQUEST_ID = 1
