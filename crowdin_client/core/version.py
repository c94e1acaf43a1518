"""Package version."""

VERSION: str = "0.1.0"
