"""Error hierarchy for the Elementary shell layers.

The extraction core never raises; these cover configuration and installation.
"""
from __future__ import annotations

from pathlib import Path


class ElementaryError(Exception):
    """Base error for all elementary errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(ElementaryError):
    """Invalid configuration value."""


class InstallError(ElementaryError):
    """Asset installation failed."""


class AssetsNotFoundError(InstallError):
    """The design-system assets are missing from the skill root."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Elementary assets not found at {path}")
        self.path = path
