"""Tests for logging setup."""

import importlib
import logging
from logging.handlers import RotatingFileHandler

import pytest

logger_module = importlib.import_module("wfs.utils.logger")


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let configure_logging run again and remove what it attached afterwards."""
    wfs_logger = logging.getLogger("wfs")
    handlers = list(wfs_logger.handlers)
    level = wfs_logger.level
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    yield
    for handler in wfs_logger.handlers:
        if handler not in handlers:
            handler.close()
    wfs_logger.handlers = handlers
    wfs_logger.setLevel(level)


def test_configure_logging_writes_rotating_file(tmp_path, fresh_logging):
    logger_module.configure_logging(tmp_path / "home", level="DEBUG")

    wfs_logger = logging.getLogger("wfs")
    added = [h for h in wfs_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(added) == 1
    assert added[0].maxBytes == 5 * 1024 * 1024
    assert added[0].backupCount == 3
    assert wfs_logger.level == logging.DEBUG

    logging.getLogger("wfs.api.filesystem.FileSystem").debug("hello log")
    added[0].flush()
    assert "hello log" in (tmp_path / "home" / "wfs.log").read_text()


def test_configure_logging_once(tmp_path, fresh_logging):
    logger_module.configure_logging(tmp_path / "one")
    logger_module.configure_logging(tmp_path / "two")
    assert not (tmp_path / "two").exists()


def test_configure_logging_accepts_warn(tmp_path, fresh_logging):
    logger_module.configure_logging(tmp_path, level="WARN")
    assert logging.getLogger("wfs").level == logging.WARNING


def test_get_logger_namespaced(wfs_home, fresh_logging):
    assert logger_module.get_logger("cli").name == "wfs.cli"
