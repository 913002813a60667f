"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from block_explorer.api.routes import router
from block_explorer.helpers.config import GatewayConfig
from block_explorer.helpers.http import create_http_client
from block_explorer.helpers.logging import get_logger
from block_explorer.helpers.rpc import RPCClient


logger = get_logger(__name__)


def create_app(config: GatewayConfig) -> FastAPI:
    """Build the gateway application.

    The RPC endpoint is frozen at this point and shared by every request. One
    httpx client is opened for the lifetime of the application.

    Args:
        config: Validated gateway configuration

    Returns:
        FastAPI application ready to be served

    Example:
        ```python
        app = create_app(load_config("config.yaml"))
        uvicorn.run(app, host="127.0.0.1", port=8080)
        ```
    """
    rpc_client = RPCClient(config.rpc.to_endpoint())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with create_http_client() as client:
            app.state.http_client = client
            logger.info("Forwarding node calls to %s", config.rpc.url)
            yield
        logger.info("HTTP client closed")

    app = FastAPI(title="Block Explorer Gateway", lifespan=lifespan)
    app.state.config = config
    app.state.rpc_client = rpc_client
    app.include_router(router)

    return app


__all__ = ["create_app"]
