"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from block_explorer.helpers.config import GatewayConfig
from block_explorer.helpers.rpc import RPCClient
from block_explorer.helpers.rpc_models import RpcEndpoint


RPC_URL = "http://node.test:8332/"

CONFIG_YAML = """\
rpc:
  url: "http://node.test:8332/"
  user: "alice"
  pass: "s3cret"
server:
  host: "127.0.0.1"
  port: 8080
"""


@pytest.fixture
def endpoint() -> RpcEndpoint:
    """Provide a node endpoint with test credentials.

    Returns:
        RpcEndpoint: Immutable endpoint pointing at a fake node
    """
    return RpcEndpoint(url=RPC_URL, username="alice", password="s3cret")


@pytest.fixture
def rpc_client(endpoint: RpcEndpoint) -> RPCClient:
    """Provide an RPC client bound to the test endpoint."""
    return RPCClient(endpoint)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid configuration file.

    Returns:
        Path: Location of the YAML file
    """
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Provide a validated configuration matching CONFIG_YAML."""
    return GatewayConfig.model_validate({
        "rpc": {"url": RPC_URL, "user": "alice", "pass": "s3cret"},
        "server": {"host": "127.0.0.1", "port": 8080},
    })


@pytest.fixture
def block_detail() -> dict[str, object]:
    """Block detail as a node would return it, including nested values."""
    return {
        "hash": "00000000000000000002a7c4c1e48d76c5a37902165a270156b7a8d72728a054",
        "confirmations": 3,
        "height": 840000,
        "version": 710926336,
        "merkleroot": "031b417c3a1828ddf3d6527fc210daafcc9218e81f98257f88d4d43bd7a5894f",
        "time": 1713571767,
        "difficulty": 86388558925171.02,
        "nTx": 3050,
        "previousblockhash": None,
        "tx": ["a0" * 32, "b1" * 32],
    }
