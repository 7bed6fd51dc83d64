from elementary.model.installation import ASSETS_SUFFIX, InstallationPaths
from elementary.model.result import MISSING_CSS_MESSAGE, ExtractionOptions, ExtractionResult

__all__ = [
    "ASSETS_SUFFIX",
    "InstallationPaths",
    "MISSING_CSS_MESSAGE",
    "ExtractionOptions",
    "ExtractionResult",
]
