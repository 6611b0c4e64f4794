"""Common configuration constants used across the application."""

# JSON-RPC envelope
JSONRPC_VERSION = "2.0"
"""Protocol version literal sent with every request"""

REQUEST_ID = 1
"""Request id; only one request is ever in flight"""

LATEST_BLOCK = "latest"
"""Block selector used when no specific block was requested"""

# Quantities
QUANTITY_BITS = 256
"""Native word size of the protocol; decoded quantities must fit in it"""

MAX_QUANTITY = 2**QUANTITY_BITS - 1
"""Largest quantity a hex field may decode to"""

WEI_PER_ETHER = 10**18
"""Number of wei in one ether"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

# Presentation
MISSING_VALUE = "n/a"
"""Placeholder rendered for absent optional fields"""


__all__ = [
    "DEFAULT_TIMEOUT",
    "JSONRPC_VERSION",
    "LATEST_BLOCK",
    "MAX_QUANTITY",
    "MISSING_VALUE",
    "QUANTITY_BITS",
    "REQUEST_ID",
    "WEI_PER_ETHER",
]
