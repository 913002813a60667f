"""Common configuration constants used across the application."""

# JSON-RPC Constants
JSONRPC_VERSION = "2.0"
"""JSON-RPC protocol version sent in every envelope"""

UNKNOWN_RPC_ERROR = "Unknown error"
"""Message used when a response has neither result nor error"""

UNREADABLE_BODY = "Unable to read error response"
"""Placeholder for an error response body that could not be read"""

# Node Method Names
GET_BLOCK = "getblock"
GET_BLOCK_COUNT = "getblockcount"
GET_BLOCK_HASH = "getblockhash"
GET_RAW_TRANSACTION = "getrawtransaction"

# Explorer Constants
LATEST_BLOCKS_WINDOW = 10
"""Number of most recent blocks fetched by /latest_blocks"""

SKIPPED_BLOCKS_HEADER = "X-Skipped-Blocks"
"""Response header reporting heights dropped from /latest_blocks"""

HASH_HEX_LENGTH = 64
"""Length of a block hash or txid in hex characters"""

# Configuration
DEFAULT_CONFIG_PATH = "config.yaml"
"""Configuration file read when EXPLORER_CONFIG is not set"""

DEFAULT_LOG_LEVEL = "INFO"
"""Log level used when neither the config file nor LOG_LEVEL sets one"""


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOG_LEVEL",
    "GET_BLOCK",
    "GET_BLOCK_COUNT",
    "GET_BLOCK_HASH",
    "GET_RAW_TRANSACTION",
    "HASH_HEX_LENGTH",
    "JSONRPC_VERSION",
    "LATEST_BLOCKS_WINDOW",
    "SKIPPED_BLOCKS_HEADER",
    "UNKNOWN_RPC_ERROR",
    "UNREADABLE_BODY",
]
