"""HTTP client utilities and helpers."""

from typing import Any

import httpx

from block_explorer.helpers.constants import UNREADABLE_BODY
from block_explorer.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(**kwargs: Any) -> httpx.AsyncClient:
    """Create the shared httpx AsyncClient used for node calls.

    No timeout is passed, so httpx's transport default applies.

    Args:
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from block_explorer.helpers.http import create_http_client

        async with create_http_client() as client:
            response = await client.post("http://127.0.0.1:8332", json={})
        ```
    """
    return httpx.AsyncClient(**kwargs)


async def read_text(response: httpx.Response) -> str:
    """Read a response body as text on a best-effort basis.

    Args:
        response: Response whose body may or may not have been read yet

    Returns:
        Body text, or a placeholder if the body could not be read
    """
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError) as e:
        logger.debug("Unable to read response body: %s", e)
        return UNREADABLE_BODY


__all__ = [
    "create_http_client",
    "read_text",
]
