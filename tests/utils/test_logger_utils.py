from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import pytest

from crowdin_client.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    LoggerUtils.reset()
    yield
    LoggerUtils.reset()


def test_get_logger_uses_namespace() -> None:
    assert LoggerUtils.get_logger("core.client").name == "CrowdinClient.core.client"
    assert LoggerUtils.get_logger().name == "CrowdinClient"


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("CrowdinClient").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_singleton_configures_console_and_file(tmp_path: Path) -> None:
    log_file: Path = tmp_path / "crowdin.log"
    first = LoggerUtils(log_file)
    second = LoggerUtils(tmp_path / "other.log")

    assert first is second
    handlers = logging.getLogger("CrowdinClient").handlers
    assert sum(isinstance(h, RotatingFileHandler) for h in handlers) == 1
    assert any(type(h) is logging.StreamHandler for h in handlers)

    LoggerUtils.get_logger(__name__).debug("written to the file")
    for handler in handlers:
        handler.flush()
    assert "written to the file" not in log_file.read_text(encoding="utf-8")

    first.set_level("DEBUG")
    LoggerUtils.get_logger(__name__).debug("now written")
    for handler in handlers:
        handler.flush()
    assert "now written" in log_file.read_text(encoding="utf-8")


def test_set_level_falls_back_to_info() -> None:
    utils = LoggerUtils(use_null_console=True)
    utils.set_level("WARNING")
    assert utils.get_level().name == "WARNING"

    utils.set_level("LOUD")  # type: ignore[arg-type]
    assert utils.get_level() == (logging.getLevelName(logging.INFO), logging.INFO)


def test_initialize_after_configuration_is_rejected() -> None:
    LoggerUtils(use_null_console=True)
    with pytest.raises(RuntimeError):
        LoggerUtils.initialize("Other")


def test_initialize_changes_namespace() -> None:
    LoggerUtils.initialize("MyApp")
    assert LoggerUtils.get_logger("x").name == "MyApp.x"


def test_package_prefix_is_dropped() -> None:
    assert LoggerUtils.get_logger("crowdin_client.core.client").name == "CrowdinClient.core.client"


def test_from_settings(tmp_path: Path) -> None:
    assert LoggerUtils.from_settings("", debug=False) is None
    assert not any(isinstance(h, RotatingFileHandler) for h in logging.getLogger("CrowdinClient").handlers)

    utils = LoggerUtils.from_settings(str(tmp_path / "debug.log"), debug=True)

    assert utils is not None
    assert utils.get_level().name == "DEBUG"
    assert any(isinstance(h, RotatingFileHandler) for h in logging.getLogger("CrowdinClient").handlers)
