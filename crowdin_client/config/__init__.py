"""Configuration loading and validation for the Crowdin client.

This package provides utilities for loading, parsing, and validating the client settings
from an INI file and ``CROWDIN_*`` environment variables.
"""

from crowdin_client.config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
)

__all__: list[str] = [
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigTypeError",
    "ConfigValueError",
]
