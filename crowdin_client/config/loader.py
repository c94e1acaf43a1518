"""Loads the client settings.

Settings come from an optional INI file, then from the CROWDIN_* environment variables,
then from keyword arguments. The merged result is validated before it is handed out.
"""

from __future__ import annotations

import configparser
import os
import re
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from crowdin_client.models.config_models import Config
from crowdin_client.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES: Final[dict[str, tuple[str, str]]] = {
    "CROWDIN_ACCESS_TOKEN": ("CROWDIN", "ACCESS_TOKEN"),
    "CROWDIN_ORGANIZATION": ("CROWDIN", "ORGANIZATION"),
    "CROWDIN_BASE_URL": ("CROWDIN", "BASE_URL"),
}

# Keyword argument -> (section, key)
ARG_OVERRIDES: Final[dict[str, tuple[str, str]]] = {
    "access_token": ("CROWDIN", "ACCESS_TOKEN"),
    "organization": ("CROWDIN", "ORGANIZATION"),
    "base_url": ("CROWDIN", "BASE_URL"),
    "total_timeout": ("HTTP", "TOTAL_TIMEOUT"),
    "proxy": ("HTTP", "PROXY"),
    "debug": ("GENERAL", "DEBUG"),
    "log_file": ("GENERAL", "LOG_FILE"),
}

ORGANIZATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]*$")


class ConfigLoaderError(Exception):
    """Base class of the settings errors."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The INI file named by the caller is missing."""


class ConfigFormatError(ConfigLoaderError):
    """The INI file cannot be parsed."""


class ConfigValueError(ConfigFormatError):
    """A setting is missing or has an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """A setting has a type the loader cannot convert."""


class ConfigLoader:
    """Handles loading and validation of the client configuration.

    Precedence, lowest first: defaults, INI file, ``CROWDIN_*`` environment variables,
    keyword arguments. Keyword arguments set to None are ignored.

    Args:
        config_filename (str | Path | None): INI file to load. None loads no file.
        **args: Overrides named after ``ARG_OVERRIDES`` (access_token, organization, base_url,
            total_timeout, proxy, debug, log_file).

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(self, *, config_filename: str | Path | None = None, **args: Any) -> None:
        self.config = Config()

        if config_filename is not None:
            parser: ConfigParser = self._read(Path(config_filename))
            self._convert_settings(parser)

        self._apply_environment()
        for name, value in args.items():
            if value is None:
                continue
            if name not in ARG_OVERRIDES:
                msg: str = f"Unknown configuration override: '{name}'"
                raise ConfigValueError(msg)
            section_name, key_name = ARG_OVERRIDES[name]
            setattr(getattr(self.config, section_name), key_name, value)

        self._validate_settings()

    @staticmethod
    def _read(config_path: Path) -> ConfigParser:
        if not config_path.exists():
            msg: str = f"Configuration file '{config_path}' not found."
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()
        try:
            parser.read(config_path, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_path}': {err}"
            raise ConfigFormatError(msg) from None
        return parser

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every defined INI value into the Config object, coerced to the declared type.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                setattr(getattr(self.config, section.name), key.name, formatter.apply_format(section, key))

    def _apply_environment(self) -> None:
        for env_name, (section_name, key_name) in ENV_OVERRIDES.items():
            value: str | None = os.environ.get(env_name)
            if value:
                logger.debug("'%s.%s' taken from the environment variable '%s'", section_name, key_name, env_name)
                setattr(getattr(self.config, section_name), key_name, value)

    def _validate_settings(self) -> None:
        """Validate the token, the API location and the HTTP settings.

        Raises:
            ConfigValueError: If a setting is missing or invalid.
        """
        crowdin = self.config.CROWDIN
        if not crowdin.ACCESS_TOKEN.strip():
            msg: str = "'CROWDIN.ACCESS_TOKEN' is not set. Set it in the file or in CROWDIN_ACCESS_TOKEN."
            raise ConfigValueError(msg)

        if crowdin.BASE_URL and not crowdin.BASE_URL.startswith(("https://", "http://")):
            msg = f"'CROWDIN.BASE_URL' must be an http(s) URL: {crowdin.BASE_URL}"
            raise ConfigValueError(msg)
        if crowdin.BASE_URL and crowdin.ORGANIZATION:
            logger.warning("'CROWDIN.BASE_URL' is set, 'CROWDIN.ORGANIZATION' is ignored.")

        if crowdin.ORGANIZATION and not ORGANIZATION_PATTERN.match(crowdin.ORGANIZATION):
            msg = f"'CROWDIN.ORGANIZATION' contains invalid characters: {crowdin.ORGANIZATION}"
            raise ConfigValueError(msg)

        if self.config.HTTP.TOTAL_TIMEOUT < 0:
            msg = f"'HTTP.TOTAL_TIMEOUT' must not be negative: {self.config.HTTP.TOTAL_TIMEOUT}"
            raise ConfigValueError(msg)


class _ConfigFormatter:
    """Converts INI strings to the type of the matching Config default (bool, float or str)."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser
        self.converters: dict[type, Callable[[str, str], Any]] = {
            bool: self.parse_as_boolean,
            float: self.parse_as_float,
            str: self.parse_as_string,
        }

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert one INI value.

        Raises:
            ConfigValueError: If the value cannot be converted to the expected type.
            ConfigTypeError: If the Config field has a type no converter handles.
        """
        expected: type = type(getattr(getattr(self.config, section.name), key.name))
        converter = self.converters.get(expected)
        if converter is None:
            msg: str = f"{section.name}.{key.name}: unsupported setting type '{expected.__name__}'"
            raise ConfigTypeError(msg)
        try:
            return converter(section.name, key.name)
        except ValueError as err:
            msg = f"{section.name}.{key.name}: expected {expected.__name__}, {err}"
            raise ConfigValueError(msg) from err

    def _unquoted(self, section: str, key: str) -> str:
        value: str = self.parser.get(section, key).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":  # noqa: PLR2004
            return value[1:-1]
        return value

    def parse_as_string(self, section: str, key: str) -> str:
        """Return the value with one pair of surrounding quotes removed."""
        return self._unquoted(section, key)

    def parse_as_float(self, section: str, key: str) -> float:
        return float(self._unquoted(section, key))

    def parse_as_boolean(self, section: str, key: str) -> bool:
        """Accept the configparser spellings: true/false, yes/no, on/off, 1/0."""
        return self.parser.getboolean(section, key)
