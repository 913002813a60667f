"""Bitcoin-style JSON-RPC client utilities."""

import json
from collections.abc import Sequence

from typing import Any

import httpx
from pydantic import ValidationError

from block_explorer.helpers.constants import (
    GET_BLOCK,
    GET_BLOCK_COUNT,
    GET_BLOCK_HASH,
    GET_RAW_TRANSACTION,
    UNKNOWN_RPC_ERROR,
)
from block_explorer.helpers.http import read_text
from block_explorer.helpers.http_models import JsonValue
from block_explorer.helpers.logging import get_logger
from block_explorer.helpers.parsers import parse_block_count
from block_explorer.helpers.rpc_models import (
    JsonRpcRequest,
    JsonRpcResponse,
    RpcEndpoint,
)


logger = get_logger(__name__)


class RpcError(Exception):
    """Base class for every failure of a single node call."""

    def __init__(self, method: str, detail: str) -> None:
        self.method = method
        self.detail = detail
        super().__init__(f"{method}: {detail}")


class RpcConnectionError(RpcError):
    """The node could not be reached (connect, DNS, TLS, read failures)."""


class RpcHttpStatusError(RpcError):
    """The node answered with a non-success HTTP status."""

    def __init__(self, method: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(method, f"HTTP {status_code}")


class RpcParseError(RpcError):
    """The response body is not a usable JSON-RPC response."""

    def __init__(self, method: str, detail: str, raw_body: str) -> None:
        self.raw_body = raw_body
        super().__init__(method, detail)


class RpcLogicError(RpcError):
    """The node answered but the call itself failed."""

    def __init__(self, method: str, message: str, error: Any = None) -> None:
        self.error = error
        super().__init__(method, message)


def format_rpc_error(error: Any) -> str:
    """Build a log-friendly message from a JSON-RPC ``error`` member.

    Args:
        error: Decoded ``error`` value, or None when absent

    Returns:
        Human readable message

    Example:
        >>> format_rpc_error({"code": -5, "message": "Block not found"})
        'Block not found (code -5)'
        >>> format_rpc_error(None)
        'Unknown error'
    """
    if error is None:
        return UNKNOWN_RPC_ERROR
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        code = error.get("code")
        return f"{error['message']} (code {code})" if code is not None else error["message"]
    return json.dumps(error)


class RPCClient:
    """JSON-RPC client for a single node endpoint.

    The client holds only the immutable endpoint, so one instance is safely
    shared by every concurrent request. Each call is a single attempt.
    """

    def __init__(self, endpoint: RpcEndpoint) -> None:
        """Initialize RPC client.

        Args:
            endpoint: Node URL and HTTP Basic credentials
        """
        self.endpoint = endpoint

    async def call(
        self,
        client: httpx.AsyncClient,
        method: str,
        params: Sequence[Any] | None = None,
    ) -> JsonValue:
        """Make a single JSON-RPC call.

        A present ``result`` wins even when the node also sent an ``error``.

        Args:
            client: HTTP client instance
            method: RPC method name (e.g., "getblockcount")
            params: Method parameters, in order

        Returns:
            RPC result value

        Raises:
            RpcConnectionError: If the node cannot be reached
            RpcHttpStatusError: If the node returns a non-success status
            RpcParseError: If the body is not a JSON-RPC response for this request
            RpcLogicError: If the response carries no result
        """
        request = JsonRpcRequest(method=method, params=list(params or []))
        logger.info("Making RPC call: method=%s, params=%s", method, request.params)

        try:
            response = await client.post(
                self.endpoint.url,
                json=request.model_dump(),
                auth=(self.endpoint.username, self.endpoint.password),
            )
        except httpx.HTTPError as e:
            logger.error("Failed to connect to RPC server: method=%s, error=%s", method, e)
            raise RpcConnectionError(method, str(e) or type(e).__name__) from e

        status = response.status_code
        logger.debug("RPC response status: method=%s, status=%d", method, status)

        if not response.is_success:
            body = await read_text(response)
            logger.error(
                "RPC server returned non-success status: method=%s, status=%d, body=%s",
                method,
                status,
                body,
            )
            raise RpcHttpStatusError(method, status, body)

        body = response.text
        logger.debug("Raw RPC response: method=%s, body=%s", method, body)

        try:
            outcome = JsonRpcResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error(
                "Failed to parse RPC response: method=%s, error=%s, body=%s",
                method,
                e,
                body,
            )
            raise RpcParseError(method, str(e), body) from e

        if outcome.id is not None and outcome.id != request.id:
            detail = f"Response id {outcome.id!r} does not match request id {request.id!r}"
            logger.error("Failed to parse RPC response: method=%s, error=%s", method, detail)
            raise RpcParseError(method, detail, body)

        if outcome.result is not None:
            logger.info("RPC call successful: method=%s", method)
            return outcome.result

        message = format_rpc_error(outcome.error)
        logger.error("RPC call failed: method=%s, error=%s", method, message)
        raise RpcLogicError(method, message, outcome.error)

    async def get_block_count(self, client: httpx.AsyncClient) -> int:
        """Get the current chain height.

        Args:
            client: HTTP client instance

        Returns:
            Height of the chain tip

        Raises:
            RpcParseError: If the node returns something other than a height
        """
        result = await self.call(client, GET_BLOCK_COUNT, [])
        try:
            return parse_block_count(result)
        except ValueError as e:
            logger.error("Unexpected block count: %s", e)
            raise RpcParseError(GET_BLOCK_COUNT, str(e), json.dumps(result)) from e

    async def get_block_hash(self, client: httpx.AsyncClient, height: int) -> JsonValue:
        """Get the hash of the block at ``height`` as returned by the node."""
        return await self.call(client, GET_BLOCK_HASH, [height])

    async def get_block(self, client: httpx.AsyncClient, block_hash: JsonValue) -> JsonValue:
        """Get block detail for ``block_hash``, passed through unmodified."""
        return await self.call(client, GET_BLOCK, [block_hash])

    async def get_raw_transaction(
        self,
        client: httpx.AsyncClient,
        txid: str,
        *,
        verbose: bool = True,
    ) -> JsonValue:
        """Get transaction detail for ``txid``.

        Args:
            client: HTTP client instance
            txid: Transaction id
            verbose: Ask the node for decoded JSON instead of raw hex

        Returns:
            Transaction detail as returned by the node
        """
        return await self.call(client, GET_RAW_TRANSACTION, [txid, verbose])


__all__ = [
    "RPCClient",
    "RpcConnectionError",
    "RpcError",
    "RpcHttpStatusError",
    "RpcLogicError",
    "RpcParseError",
    "format_rpc_error",
]
