"""Latest blocks aggregation.

Fetches the most recent blocks tip first with a strictly sequential chain of
node calls per height:

1. ``getblockcount`` once; a failure here fails the whole request.
2. For each height from the tip downward: ``getblockhash`` then ``getblock``.
   A failure at either step drops that height and moves on to the next one.

Total latency grows linearly with the window size; there is no fan-out.
"""

from typing import Any

import httpx
from pydantic import BaseModel, Field

from block_explorer.helpers.constants import LATEST_BLOCKS_WINDOW
from block_explorer.helpers.logging import get_logger
from block_explorer.helpers.rpc import RPCClient, RpcError


logger = get_logger(__name__)


class LatestBlocks(BaseModel):
    """Blocks fetched from the tip downward, with the number of dropped heights."""

    block_count: int = Field(..., description="Chain height reported by the node")
    blocks: list[Any] = Field(default_factory=list, description="Block details, tip first")
    skipped: int = Field(default=0, ge=0, description="Heights whose fetch failed")


async def fetch_latest_blocks(
    rpc_client: RPCClient,
    client: httpx.AsyncClient,
    window_size: int = LATEST_BLOCKS_WINDOW,
) -> LatestBlocks:
    """Fetch up to ``window_size`` blocks ending at the chain tip.

    Args:
        rpc_client: RPC client instance
        client: HTTP client instance
        window_size: Number of heights to attempt

    Returns:
        LatestBlocks with 0..window_size entries ordered by decreasing height

    Raises:
        RpcError: If the initial block count cannot be obtained

    Example:
        ```python
        async with create_http_client() as client:
            latest = await fetch_latest_blocks(rpc, client)
            # latest.blocks[0] is the tip
        ```
    """
    block_count = await rpc_client.get_block_count(client)

    blocks: list[Any] = []
    skipped = 0

    for offset in range(window_size):
        height = block_count - offset
        # Chains shorter than the window stop at genesis
        if height < 0:
            break

        try:
            block_hash = await rpc_client.get_block_hash(client, height)
            block = await rpc_client.get_block(client, block_hash)
        except RpcError as e:
            logger.warning("Skipping block at height %d: %s", height, e)
            skipped += 1
            continue

        blocks.append(block)

    if skipped:
        logger.warning(
            "Latest blocks incomplete: tip=%d, fetched=%d, skipped=%d",
            block_count,
            len(blocks),
            skipped,
        )

    return LatestBlocks(block_count=block_count, blocks=blocks, skipped=skipped)


__all__ = ["LatestBlocks", "fetch_latest_blocks"]
