"""Elementary: design-data extraction for the Elementary design system."""
from __future__ import annotations

__version__ = "0.1.0"

from elementary.config import ElementaryConfig
from elementary.extraction import extract_design_data
from elementary.install import install_assets, prepare_installation
from elementary.model import ExtractionOptions, ExtractionResult, InstallationPaths
from elementary.stylesheet import (
    TokenCategory,
    categorize_tokens,
    extract_classes,
    extract_tokens,
)

__all__ = [
    "__version__",
    "ElementaryConfig",
    "ExtractionOptions",
    "ExtractionResult",
    "InstallationPaths",
    "TokenCategory",
    "categorize_tokens",
    "extract_classes",
    "extract_design_data",
    "extract_tokens",
    "install_assets",
    "prepare_installation",
]
