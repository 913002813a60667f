"""Tests for the command line entry point."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from block_explorer import main as main_module


@pytest.fixture
def uvicorn_run(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace uvicorn.run so no socket is bound."""
    run = MagicMock()
    monkeypatch.setattr(main_module.uvicorn, "run", run)
    return run


@pytest.fixture(autouse=True)
def no_logging_changes(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Keep process-wide logging defaults untouched."""
    configure = MagicMock()
    monkeypatch.setattr(main_module, "configure_logging", configure)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("EXPLORER_CONFIG", raising=False)
    return configure


def test_missing_config_exits_before_serving(
    tmp_path: Path, uvicorn_run: MagicMock
) -> None:
    """Test a missing configuration file is fatal."""
    status = main_module.main(["--config", str(tmp_path / "missing.yaml")])

    assert status == 1
    uvicorn_run.assert_not_called()


def test_invalid_config_exits_before_serving(
    tmp_path: Path, uvicorn_run: MagicMock
) -> None:
    """Test a malformed configuration file is fatal."""
    path = tmp_path / "config.yaml"
    path.write_text("rpc: {url: 'http://n'}\n", encoding="utf-8")

    assert main_module.main(["--config", str(path)]) == 1
    uvicorn_run.assert_not_called()


def test_serves_on_configured_address(
    config_file: Path, uvicorn_run: MagicMock, no_logging_changes: MagicMock
) -> None:
    """Test the configured host and port are used."""
    status = main_module.main(["--config", str(config_file)])

    assert status == 0
    _, kwargs = uvicorn_run.call_args
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8080
    assert kwargs["log_level"] == "info"
    no_logging_changes.assert_called_once_with("INFO", log_color=False)


def test_command_line_overrides(
    config_file: Path, uvicorn_run: MagicMock, no_logging_changes: MagicMock
) -> None:
    """Test --host, --port and --log-level override the file."""
    main_module.main([
        "--config",
        str(config_file),
        "--host",
        "0.0.0.0",
        "--port",
        "9090",
        "--log-level",
        "debug",
    ])

    _, kwargs = uvicorn_run.call_args
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9090
    assert kwargs["log_level"] == "debug"
    no_logging_changes.assert_called_once_with("DEBUG", log_color=False)


def test_falsy_overrides_are_honoured(
    config_file: Path, uvicorn_run: MagicMock
) -> None:
    """Test --port 0 and an empty --host are passed on rather than ignored."""
    main_module.main(["--config", str(config_file), "--host", "", "--port", "0"])

    _, kwargs = uvicorn_run.call_args
    assert kwargs["host"] == ""
    assert kwargs["port"] == 0
