"""Logger namespace of the Crowdin client.

Every module obtains its logger through ``LoggerUtils.get_logger(__name__)``; the records end up
under the ``CrowdinClient`` namespace and are discarded until an application attaches handlers
by creating a LoggerUtils instance.
"""

from __future__ import annotations

import logging
import sys
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LoggerUtils"]

LevelType: TypeAlias = Literal["NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_NAMESPACE: Final[str] = "CrowdinClient"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
PACKAGE_PREFIX: Final[str] = "crowdin_client."

FILE_MAX_BYTES: Final[int] = 2 * 1024 * 1024  # 2MB
FILE_BACKUP_COUNT: Final[int] = 2
CONSOLE_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)-40s %(funcName)s: %(message)s"

logging.getLogger(DEFAULT_NAMESPACE).addHandler(NullHandler())


class LogLevel(NamedTuple):
    name: str
    value: int


class LoggerUtils:
    """Singleton that attaches console and file handlers to the client's logger namespace.

    The first instance configures the handlers; later instances return the same object
    and leave the handlers untouched until ``reset`` is called.

    Example:
        LoggerUtils("crowdin.log").set_level("DEBUG")
    """

    _namespace: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(
        self,
        filename: str | Path = "",
        *,
        use_null_console: bool = False,
        max_bytes: int = FILE_MAX_BYTES,
        backup_count: int = FILE_BACKUP_COUNT,
    ) -> None:
        """Configure the namespace logger once.

        Args:
            filename (str | Path): Log file path. An empty name disables the file handler.
            use_null_console (bool): Skip the console handler, e.g. when the host owns stderr.
            max_bytes (int): Size at which the log file is rotated.
            backup_count (int): Number of rotated files kept.
        """
        if LoggerUtils._configured:
            return

        self.namespace_logger: logging.Logger = logging.getLogger(self._namespace)
        # Handlers filter by their own level; the logger itself must let INFO through.
        self.namespace_logger.setLevel(DEFAULT_LOG_LEVEL)

        if not use_null_console and sys.stderr is not None:
            self._add_console_handler()

        log_path: str = str(filename).strip()
        if log_path:
            self._add_file_handler(log_path, max_bytes, backup_count)
        else:
            self.namespace_logger.debug("No log file configured")

        LoggerUtils._configured = True

    @classmethod
    def from_settings(cls, log_file: str, *, debug: bool = False) -> Self | None:
        """Configure logging from the ``[GENERAL]`` settings.

        Returns:
            Self | None: The configured instance, or None when neither a log file nor debug output was requested.
        """
        if not log_file and not debug:
            return None
        instance = cls(log_file)
        if debug:
            instance.set_level("DEBUG")
        return instance

    @classmethod
    def initialize(cls, namespace: str) -> None:
        """Move the client's loggers under another namespace, before any handler is configured.

        Raises:
            RuntimeError: If the handlers are already configured.
        """
        if cls._configured:
            msg = f"Logging is already configured under '{cls._namespace}'"
            raise RuntimeError(msg)
        cls._namespace = namespace

    @classmethod
    def reset(cls) -> None:
        """Detach the handlers added by this class and forget the singleton."""
        namespace_logger: logging.Logger = logging.getLogger(cls._namespace)
        for handler in list(namespace_logger.handlers):
            if isinstance(handler, StreamHandler):
                namespace_logger.removeHandler(handler)
                handler.close()
        namespace_logger.setLevel(logging.NOTSET)
        cls._namespace = DEFAULT_NAMESPACE
        cls._configured = False
        cls._instance = None

    def _add_console_handler(self) -> None:
        # RotatingFileHandler derives from StreamHandler.
        if any(type(h) is StreamHandler for h in self.namespace_logger.handlers):
            self.namespace_logger.warning("Console handler already attached")
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter(CONSOLE_FORMAT))
        self.namespace_logger.addHandler(console_handler)

    def _add_file_handler(self, filename: str, max_bytes: int, backup_count: int) -> None:
        if any(isinstance(h, RotatingFileHandler) for h in self.namespace_logger.handlers):
            self.namespace_logger.warning("File handler already attached")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        except OSError as err:
            self.namespace_logger.error("Cannot open log file '%s': %s", filename, err)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(Formatter(FILE_FORMAT))
        self.namespace_logger.addHandler(file_handler)

    def set_level(self, level: LevelType) -> None:
        """Set the namespace level; unknown names fall back to INFO with a warning."""
        levels: dict[str, int] = logging.getLevelNamesMapping()
        value: int | None = levels.get(level.upper())
        if value is None:
            self.namespace_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.namespace_logger.warning("Unknown logging level '%s', using INFO", level)
            return
        self.namespace_logger.setLevel(value)

    def get_level(self) -> LogLevel:
        value: int = self.namespace_logger.getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(value), value=value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Return the logger for a module of the client.

        Args:
            name (str | None): Usually ``__name__``. The ``crowdin_client.`` prefix is dropped,
                so ``crowdin_client.core.client`` logs as ``CrowdinClient.core.client``.
                None returns the namespace logger itself.
        """
        namespace: str = LoggerUtils._namespace
        if not name:
            return logging.getLogger(namespace)
        return logging.getLogger(f"{namespace}.{name.removeprefix(PACKAGE_PREFIX)}")
