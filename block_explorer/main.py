"""Block explorer gateway entry point.

Usage:
    python -m block_explorer.main --config config.yaml
"""

import argparse
import sys

import uvicorn

from block_explorer.api.server import create_app
from block_explorer.helpers.config import ConfigError, load_config
from block_explorer.helpers.logging import LOG_LEVELS, configure_logging, get_logger


logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="HTTP gateway for block and transaction lookups on a JSON-RPC node"
    )
    parser.add_argument(
        "--config",
        help="Path to the YAML configuration file (default: $EXPLORER_CONFIG or config.yaml)",
    )
    parser.add_argument("--host", help="Override server.host")
    parser.add_argument("--port", type=int, help="Override server.port")
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS),
        type=str.upper,
        help="Override logging.level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load configuration and serve the gateway until interrupted.

    Returns:
        Process exit status; 1 when the configuration cannot be loaded
    """
    args = build_parser().parse_args(argv)

    logger.info("Starting block explorer gateway")
    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Failed to load configuration: %s", e)
        return 1

    log_level = args.log_level or config.logging.level
    configure_logging(log_level, log_color=config.logging.color)

    host = args.host if args.host is not None else config.server.host
    port = args.port if args.port is not None else config.server.port

    app = create_app(config)
    logger.info("Listening on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
