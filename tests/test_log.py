from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tfforeman.log import LOGGER_NAME, configure_logging, resolve_level


def test_resolve_level_aliases() -> None:
    assert resolve_level("trace") == logging.DEBUG
    assert resolve_level("warn") == logging.WARNING
    assert resolve_level("INFO") == logging.INFO
    assert resolve_level("none") > logging.CRITICAL
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_configure_logging_writes_file_and_replaces_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "provider.log"
    logger = configure_logging("debug", log_file)
    configure_logging("debug", log_file)
    try:
        marked = [handler for handler in logger.handlers if getattr(handler, "_tfforeman_handler", False)]
        assert len(marked) == 1

        logging.getLogger(f"{LOGGER_NAME}.services").debug("organizations.read")
        marked[0].flush()
        assert "organizations.read" in log_file.read_text(encoding="utf-8")
    finally:
        configure_logging("warning")
