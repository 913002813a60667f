"""Explorer HTTP routes.

Node failures never reach the caller in detail: every ``RpcError`` is logged
and answered with a generic 500 message.
"""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from block_explorer.blocks.latest import fetch_latest_blocks
from block_explorer.helpers.constants import SKIPPED_BLOCKS_HEADER
from block_explorer.helpers.logging import get_logger
from block_explorer.helpers.parsers import (
    IdentifierValidationError,
    parse_block_hash,
    parse_txid,
)
from block_explorer.helpers.rpc import RPCClient, RpcError


logger = get_logger(__name__)

router = APIRouter()


def get_rpc_client(request: Request) -> RPCClient:
    """Shared RPC client created at startup."""
    return request.app.state.rpc_client


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared HTTP client opened by the application lifespan."""
    return request.app.state.http_client


RpcClientDep = Annotated[RPCClient, Depends(get_rpc_client)]
HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]


@router.get("/block/{block_hash}")
async def get_block(
    block_hash: str, rpc_client: RpcClientDep, client: HttpClientDep
) -> JSONResponse:
    try:
        normalized = parse_block_hash(block_hash)
    except IdentifierValidationError as e:
        logger.debug("Rejected block hash %r: %s", block_hash, e)
        raise HTTPException(status_code=400, detail="Invalid block hash") from e

    try:
        block = await rpc_client.get_block(client, normalized)
    except RpcError as e:
        logger.error("Block lookup failed: hash=%s, error=%r", normalized, e)
        raise HTTPException(
            status_code=500, detail="Failed to retrieve block information"
        ) from e

    return JSONResponse(content=block)


@router.get("/tx/{txid}")
async def get_transaction(
    txid: str, rpc_client: RpcClientDep, client: HttpClientDep
) -> JSONResponse:
    try:
        normalized = parse_txid(txid)
    except IdentifierValidationError as e:
        logger.debug("Rejected txid %r: %s", txid, e)
        raise HTTPException(status_code=400, detail="Invalid transaction id") from e

    try:
        transaction = await rpc_client.get_raw_transaction(client, normalized)
    except RpcError as e:
        logger.error("Transaction lookup failed: txid=%s, error=%r", normalized, e)
        raise HTTPException(
            status_code=500, detail="Failed to retrieve transaction information"
        ) from e

    return JSONResponse(content=transaction)


@router.get("/latest_blocks")
async def get_latest_blocks(
    rpc_client: RpcClientDep, client: HttpClientDep
) -> JSONResponse:
    """Most recent blocks tip first; dropped heights are counted in a header."""
    try:
        latest = await fetch_latest_blocks(rpc_client, client)
    except RpcError as e:
        logger.error("Latest blocks lookup failed: error=%r", e)
        raise HTTPException(
            status_code=500, detail="Failed to retrieve latest blocks"
        ) from e

    return JSONResponse(
        content=latest.blocks,
        headers={SKIPPED_BLOCKS_HEADER: str(latest.skipped)},
    )


__all__ = ["get_http_client", "get_rpc_client", "router"]
