"""Installation model: the source/destination pair for an asset install."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Relative location of the design-system assets under any root.
ASSETS_SUFFIX: tuple[str, ...] = ("assets", "elementary")


@dataclass(frozen=True)
class InstallationPaths:
    """Where assets are copied from and where they land."""

    source: Path
    destination: Path
