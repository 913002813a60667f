"""Logger module."""

import logging
import sys

import colorlog

from block_explorer.helpers.constants import DEFAULT_LOG_LEVEL

loggers: dict[str, logging.Logger] = {}

# Handler installed by get_logger on each cached logger
_handlers: dict[str, logging.Handler] = {}

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Process-wide defaults, set once at startup by configure_logging
_defaults: dict[str, str | bool] = {"log_level": DEFAULT_LOG_LEVEL, "log_color": False}


def _resolve_level(log_level: str) -> int:
    level = LOG_LEVELS.get(log_level.upper())
    if level is None:
        err_msg = f"Invalid log level: {log_level}"
        raise ValueError(err_msg)
    return level


def _build_handler(log_handler: str, level: int, *, log_color: bool) -> logging.Handler:
    if log_handler == "stdout" and not log_color:
        handler = logging.StreamHandler(sys.stdout)
    elif log_handler == "stdout" and log_color:
        handler = colorlog.StreamHandler(sys.stdout)
    else:
        err_msg = f"Invalid handler: {log_handler}"
        raise ValueError(err_msg)

    handler.setLevel(level)

    if not log_color:
        formatter = logging.Formatter(LOG_FORMAT)
    else:
        formatter = colorlog.ColoredFormatter(
            f"%(log_color)s {LOG_FORMAT}",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
        )

    handler.setFormatter(formatter)
    return handler


def configure_logging(log_level: str = DEFAULT_LOG_LEVEL, *, log_color: bool = False) -> None:
    """Set the level and colour for every logger of this application.

    Module-level loggers are created at import time, before configuration is
    read, so loggers already handed out get a fresh handler built with the
    new level and colour.

    Args:
        log_level: The logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
        log_color: Whether to use colored output.

    Raises:
        ValueError: If an invalid log level is provided.
    """
    level = _resolve_level(log_level)
    _defaults["log_level"] = log_level.upper()
    _defaults["log_color"] = log_color

    for name, logger in loggers.items():
        logger.setLevel(level)
        old_handler = _handlers.get(name)
        if old_handler is not None:
            logger.removeHandler(old_handler)
            old_handler.close()
        handler = _build_handler("stdout", level, log_color=log_color)
        logger.addHandler(handler)
        _handlers[name] = handler


def get_logger(
    name: str,
    log_handler: str = "stdout",
    log_level: str | None = None,
    log_color: bool | None = None,
) -> logging.Logger:
    """Get logger.

    Args:
        name: The name of the logger.
        log_handler: The log handler type ('stdout').
        log_level: The logging level, defaults to the configured level.
        log_color: Whether to use colored output, defaults to the configured value.

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If invalid handler or log level is provided.
    """
    if name in loggers:
        return loggers[name]

    if log_level is None:
        log_level = str(_defaults["log_level"])
    if log_color is None:
        log_color = bool(_defaults["log_color"])

    level = _resolve_level(log_level)
    handler = _build_handler(log_handler, level, log_color=log_color)

    logger = logging.getLogger(name) if not log_color else colorlog.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)

    loggers[name] = logger
    _handlers[name] = handler
    return logger


__all__ = ["LOG_LEVELS", "configure_logging", "get_logger"]
