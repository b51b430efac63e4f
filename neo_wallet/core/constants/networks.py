NETWORK_MAINNET = "mainnet"
NETWORK_TESTNET = "testnet"

NEON_DB_MAINNET = "MainNet"
NEON_DB_TESTNET = "TestNet"

NETWORK_TO_NEON_DB: dict[str, str] = {
    NETWORK_MAINNET: NEON_DB_MAINNET,
    NETWORK_TESTNET: NEON_DB_TESTNET,
}

NEON_DB_API_URLS: dict[str, str] = {
    NEON_DB_MAINNET: "https://api.neonwallet.com",
    NEON_DB_TESTNET: "https://testnet-api.neonwallet.com",
}

# Version byte of a legacy NEO address payload
ADDRESS_VERSION = 0x17
SCRIPT_HASH_BYTES = 20
