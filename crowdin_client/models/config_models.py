"""Configuration data models for the Crowdin client.

Each dataclass mirrors one section of the INI configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Config"]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""


@dataclass
class Crowdin:
    ACCESS_TOKEN: str = ""
    ORGANIZATION: str = ""
    BASE_URL: str = ""


@dataclass
class Http:
    TOTAL_TIMEOUT: float = 30.0
    PROXY: str = ""


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    CROWDIN: Crowdin = field(default_factory=Crowdin)
    HTTP: Http = field(default_factory=Http)
