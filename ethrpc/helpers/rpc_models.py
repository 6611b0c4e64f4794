"""Pydantic models and builders for JSON-RPC requests."""

from enum import Enum, StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ethrpc.helpers.constants import JSONRPC_VERSION, LATEST_BLOCK, REQUEST_ID
from ethrpc.helpers.errors import InvalidUserInputError
from ethrpc.helpers.parsers import encode_hex


# JSON value type - using Any for the recursive case
# since pyright has trouble with recursive type aliases
type JsonValue = str | int | float | bool | dict[str, Any] | list[Any] | None


class ParamShape(Enum):
    """Shape of the ``params`` list a method expects."""

    NONE = "none"
    FLAT = "flat"
    BLOCK_LOOKUP = "block_lookup"


class Method(StrEnum):
    """Supported JSON-RPC methods."""

    ACCOUNTS = "eth_accounts"
    GAS_PRICE = "eth_gasPrice"
    BLOCK_NUMBER = "eth_blockNumber"
    GET_BALANCE = "eth_getBalance"
    GET_TRANSACTION_COUNT = "eth_getTransactionCount"
    GET_BLOCK_TRANSACTION_COUNT_BY_HASH = "eth_getBlockTransactionCountByHash"
    GET_BLOCK_TRANSACTION_COUNT_BY_NUMBER = "eth_getBlockTransactionCountByNumber"
    GET_BLOCK_BY_HASH = "eth_getBlockByHash"
    GET_BLOCK_BY_NUMBER = "eth_getBlockByNumber"
    GET_TRANSACTION_BY_HASH = "eth_getTransactionByHash"

    @property
    def param_shape(self) -> ParamShape:
        """Parameter-list shape this method is called with."""
        return METHOD_PARAM_SHAPES[self]


METHOD_PARAM_SHAPES: dict[Method, ParamShape] = {
    Method.ACCOUNTS: ParamShape.NONE,
    Method.GAS_PRICE: ParamShape.NONE,
    Method.BLOCK_NUMBER: ParamShape.NONE,
    Method.GET_BALANCE: ParamShape.FLAT,
    Method.GET_TRANSACTION_COUNT: ParamShape.FLAT,
    Method.GET_BLOCK_TRANSACTION_COUNT_BY_HASH: ParamShape.FLAT,
    Method.GET_BLOCK_TRANSACTION_COUNT_BY_NUMBER: ParamShape.FLAT,
    Method.GET_BLOCK_BY_HASH: ParamShape.BLOCK_LOOKUP,
    Method.GET_BLOCK_BY_NUMBER: ParamShape.BLOCK_LOOKUP,
    Method.GET_TRANSACTION_BY_HASH: ParamShape.FLAT,
}


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request with a flat list of string params."""

    model_config = ConfigDict(frozen=True)

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    method: Method = Field(..., description="Method name to call")
    params: list[str] = Field(default_factory=list, description="Method parameters")
    id: int = Field(default=REQUEST_ID, description="Request ID")

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body posted to the endpoint."""
        return self.model_dump(mode="json")


class BlockLookupRequest(JsonRpcRequest):
    """JSON-RPC request for a block lookup.

    Params are an ``(identifier, include_full_transactions)`` pair.
    """

    params: tuple[str, bool] = Field(..., description="Block identifier and full-tx flag")


def block_selector(block_number: int | None) -> str:
    """Build the block parameter for a request.

    ``None`` and ``0`` both mean "no specific block" and select the latest
    block. Any other number is sent as a hex quantity.

    Raises:
        InvalidUserInputError: If block_number is negative

    Example:
        >>> block_selector(None)
        'latest'
        >>> block_selector(12710481)
        '0xc1f251'
    """
    if not block_number:
        return LATEST_BLOCK
    if block_number < 0:
        msg = f"Block number must not be negative: {block_number}"
        raise InvalidUserInputError(msg)
    return encode_hex(block_number)


def build_request(method: Method, params: list[str] | None = None) -> JsonRpcRequest:
    """Build a flat-params request, checking the params match the method shape."""
    params = params or []
    shape = method.param_shape
    if shape is ParamShape.BLOCK_LOOKUP:
        msg = f"{method} takes block lookup params, use build_block_lookup"
        raise ValueError(msg)
    if shape is ParamShape.NONE and params:
        msg = f"{method} takes no params, got {params!r}"
        raise ValueError(msg)
    return JsonRpcRequest(method=method, params=params)


def build_block_lookup(method: Method, identifier: str) -> BlockLookupRequest:
    """Build a block lookup request that always asks for full transactions."""
    if method.param_shape is not ParamShape.BLOCK_LOOKUP:
        msg = f"{method} is not a block lookup method"
        raise ValueError(msg)
    return BlockLookupRequest(method=method, params=(identifier, True))


def accounts_request() -> JsonRpcRequest:
    return build_request(Method.ACCOUNTS)


def gas_price_request() -> JsonRpcRequest:
    return build_request(Method.GAS_PRICE)


def block_number_request() -> JsonRpcRequest:
    return build_request(Method.BLOCK_NUMBER)


def balance_request(address: str, block_number: int | None = None) -> JsonRpcRequest:
    return build_request(Method.GET_BALANCE, [address, block_selector(block_number)])


def transaction_count_request(
    address: str, block_number: int | None = None
) -> JsonRpcRequest:
    return build_request(
        Method.GET_TRANSACTION_COUNT, [address, block_selector(block_number)]
    )


def block_transaction_count_request(
    block_hash: str | None = None, block_number: int | None = None
) -> JsonRpcRequest:
    """Count transactions in a block, by hash when given, else by number."""
    if block_hash:
        return build_request(Method.GET_BLOCK_TRANSACTION_COUNT_BY_HASH, [block_hash])
    return build_request(
        Method.GET_BLOCK_TRANSACTION_COUNT_BY_NUMBER, [block_selector(block_number)]
    )


def block_request(
    block_hash: str | None = None, block_number: int | None = None
) -> BlockLookupRequest:
    """Fetch a block, by hash when given, else by number."""
    if block_hash:
        return build_block_lookup(Method.GET_BLOCK_BY_HASH, block_hash)
    return build_block_lookup(Method.GET_BLOCK_BY_NUMBER, block_selector(block_number))


def transaction_request(tx_hash: str) -> JsonRpcRequest:
    return build_request(Method.GET_TRANSACTION_BY_HASH, [tx_hash])


__all__ = [
    "BlockLookupRequest",
    "JsonRpcRequest",
    "JsonValue",
    "Method",
    "ParamShape",
    "accounts_request",
    "balance_request",
    "block_number_request",
    "block_request",
    "block_selector",
    "block_transaction_count_request",
    "build_block_lookup",
    "build_request",
    "gas_price_request",
    "transaction_count_request",
    "transaction_request",
]
