"""Ethereum JSON-RPC client utilities."""

from typing import Any

import httpx

from ethrpc.data.models import (
    Block,
    Quantity,
    Transaction,
    decode_quantity,
    parse_block,
    parse_transaction,
)
from ethrpc.helpers.constants import DEFAULT_TIMEOUT
from ethrpc.helpers.errors import (
    MissingResultError,
    ProtocolError,
    RpcResponseError,
    TransportError,
)
from ethrpc.helpers.logging import get_logger
from ethrpc.helpers.rpc_models import (
    JsonRpcRequest,
    JsonValue,
    accounts_request,
    balance_request,
    block_number_request,
    block_request,
    block_transaction_count_request,
    gas_price_request,
    transaction_count_request,
    transaction_request,
)


logger = get_logger(__name__)


def create_http_client(timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Example:
        ```python
        from ethrpc.helpers.rpc import create_http_client

        async with create_http_client(timeout=60.0) as client:
            block = await rpc.get_block(client)
        ```
    """
    return httpx.AsyncClient(
        timeout=timeout, headers={"Content-Type": "application/json"}, **kwargs
    )


class RPCClient:
    """Ethereum JSON-RPC client issuing one request at a time."""

    def __init__(self, rpc_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize RPC client.

        Args:
            rpc_url: Ethereum JSON-RPC endpoint URL
            timeout: Default timeout for requests in seconds

        Raises:
            ValueError: If rpc_url is empty or None
        """
        if not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        self.rpc_url = rpc_url
        self.timeout = timeout

    async def send(
        self,
        client: httpx.AsyncClient,
        request: JsonRpcRequest,
        *,
        timeout: float | None = None,
    ) -> JsonValue:
        """Post one request and return its ``result``.

        Args:
            client: HTTP client instance
            request: Request envelope to send
            timeout: Optional timeout override

        Returns:
            The ``result`` member of the response, which may be ``None``

        Raises:
            TransportError: If the HTTP round trip fails or returns an error status
            ProtocolError: If the body is not a JSON object
            RpcResponseError: If the body carries a JSON-RPC error object
            MissingResultError: If the body has neither ``result`` nor ``error``
        """
        logger.debug("Sending %s params=%s", request.method, request.params)
        try:
            response = await client.post(
                self.rpc_url,
                json=request.to_payload(),
                timeout=timeout or self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("%s transport error: %s", request.method, e)
            msg = f"{request.method} request to {self.rpc_url} failed: {e}"
            raise TransportError(msg) from e

        try:
            body = response.json()
        except ValueError as e:
            logger.warning("%s returned a non-JSON body", request.method)
            msg = f"{request.method} response is not valid JSON"
            raise ProtocolError(msg) from e

        if not isinstance(body, dict):
            logger.warning("%s returned a non-object body", request.method)
            msg = f"{request.method} response is not a JSON object"
            raise ProtocolError(msg)

        if "error" in body:
            error = body["error"]
            logger.warning("%s RPC error: %s", request.method, error)
            if isinstance(error, dict):
                raise RpcResponseError(
                    error.get("code"), str(error.get("message", "")), error.get("data")
                )
            raise RpcResponseError(None, str(error))

        if "result" not in body:
            logger.warning("%s response has no result", request.method)
            msg = f"{request.method} response has no result"
            raise MissingResultError(msg)

        return body["result"]

    async def _send_quantity(
        self, client: httpx.AsyncClient, request: JsonRpcRequest
    ) -> Quantity:
        result = await self.send(client, request)
        if result is None:
            msg = f"{request.method} returned no result"
            raise MissingResultError(msg)
        if not isinstance(result, str):
            msg = f"{request.method} result is not a hex quantity: {result!r}"
            raise ProtocolError(msg)
        return decode_quantity(result, field="result")

    async def _send_object(
        self, client: httpx.AsyncClient, request: JsonRpcRequest, what: str
    ) -> dict[str, Any]:
        result = await self.send(client, request)
        if result is None:
            msg = f"{what} not found"
            raise MissingResultError(msg)
        if not isinstance(result, dict):
            msg = f"{request.method} result is not an object"
            raise ProtocolError(msg)
        return result

    async def get_accounts(self, client: httpx.AsyncClient) -> list[str]:
        """Get the addresses managed by the node."""
        request = accounts_request()
        result = await self.send(client, request)
        if not isinstance(result, list) or not all(isinstance(a, str) for a in result):
            msg = f"{request.method} result is not a list of addresses"
            raise ProtocolError(msg)
        return result

    async def get_gas_price(self, client: httpx.AsyncClient) -> Quantity:
        """Get the current gas price in wei."""
        return await self._send_quantity(client, gas_price_request())

    async def get_block_number(self, client: httpx.AsyncClient) -> Quantity:
        """Get the latest block number."""
        return await self._send_quantity(client, block_number_request())

    async def get_balance(
        self,
        client: httpx.AsyncClient,
        address: str,
        block_number: int | None = None,
    ) -> Quantity:
        """Get the balance of an address in wei.

        Args:
            client: HTTP client instance
            address: Ethereum address
            block_number: Block number, or None for the latest block

        Returns:
            Balance in wei
        """
        return await self._send_quantity(client, balance_request(address, block_number))

    async def get_transaction_count(
        self,
        client: httpx.AsyncClient,
        address: str,
        block_number: int | None = None,
    ) -> Quantity:
        """Get the number of transactions sent from an address."""
        return await self._send_quantity(
            client, transaction_count_request(address, block_number)
        )

    async def get_block_transaction_count(
        self,
        client: httpx.AsyncClient,
        block_hash: str | None = None,
        block_number: int | None = None,
    ) -> Quantity:
        """Get the number of transactions in a block, by hash or by number."""
        return await self._send_quantity(
            client, block_transaction_count_request(block_hash, block_number)
        )

    async def get_block(
        self,
        client: httpx.AsyncClient,
        block_hash: str | None = None,
        block_number: int | None = None,
    ) -> Block:
        """Get a block with full transaction objects, by hash or by number.

        Raises:
            MissingResultError: If the node does not know the block
            MalformedHexError: If any quantity in the block fails to decode
        """
        request = block_request(block_hash, block_number)
        result = await self._send_object(client, request, "Block")
        return parse_block(result)

    async def get_transaction(self, client: httpx.AsyncClient, tx_hash: str) -> Transaction:
        """Get a transaction by hash.

        Raises:
            MissingResultError: If the node does not know the transaction
            MalformedHexError: If any quantity in the transaction fails to decode
        """
        result = await self._send_object(client, transaction_request(tx_hash), "Transaction")
        return parse_transaction(result)


__all__ = [
    "RPCClient",
    "create_http_client",
]
