"""Pydantic models for JSON-RPC requests, responses and node endpoints."""

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from block_explorer.helpers.constants import JSONRPC_VERSION


def new_request_id() -> str:
    """Return a fresh id for correlating one request with its response."""
    return uuid4().hex


class RpcEndpoint(BaseModel):
    """Node endpoint and credentials, fixed for the process lifetime."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="Node JSON-RPC URL")
    username: str = Field(..., description="HTTP Basic username")
    password: str = Field(..., repr=False, description="HTTP Basic password")


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    id: int | str = Field(default_factory=new_request_id, description="Request ID")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Method parameters"
    )


class JsonRpcResponse(BaseModel):
    """JSON-RPC response model.

    A JSON ``null`` in ``result`` or ``error`` is indistinguishable from the
    member being absent. Extra members sent by the node are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: int | str | None = Field(default=None, description="Echoed request ID")
    result: Any = Field(default=None, description="Call result")
    error: Any = Field(default=None, description="Node-side error object")


__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "RpcEndpoint",
    "new_request_id",
]
