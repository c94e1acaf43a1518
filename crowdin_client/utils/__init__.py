"""Utility modules for the Crowdin client.

This package provides the logging helper shared by every module of the client.
"""

from crowdin_client.utils.logger_utils import LoggerUtils

__all__: list[str] = ["LoggerUtils"]
