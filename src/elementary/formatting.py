"""Report formatting for extraction results."""

from __future__ import annotations

import json

from elementary.model.result import ExtractionResult
from elementary.stylesheet.categories import TokenCategory

__all__ = ["format_human", "format_json"]

CATEGORY_LABELS: dict[TokenCategory, str] = {
    TokenCategory.COLORS: "Colors",
    TokenCategory.BACKGROUNDS: "Backgrounds",
    TokenCategory.SPACING: "Spacing",
    TokenCategory.RADII: "Radii",
    TokenCategory.BORDERS: "Borders",
    TokenCategory.EFFECTS: "Effects",
    TokenCategory.TYPOGRAPHY: "Typography",
    TokenCategory.Z_INDEX: "Z-Index",
    TokenCategory.ANIMATION: "Animation",
    TokenCategory.OTHER: "Other",
}


def format_json(result: ExtractionResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def format_human(result: ExtractionResult) -> str:
    """Render *result* as a plain-text report, one item per line."""
    if not result.ok:
        return f"Error: {result.error}"

    lines = [
        f"CSS File: {result.css_file}",
        "",
        f"Component Classes ({result.class_count}):",
    ]
    lines.extend(f"  {cls}" for cls in result.classes)

    if result.has_tokens:
        lines.append("")
        lines.append(f"Design Tokens ({result.token_count}) from {result.theme} theme:")
        buckets = result.tokens_by_category or {}
        for category in TokenCategory:
            tokens = buckets.get(category, ())
            if not tokens:
                continue
            lines.append("")
            lines.append(f"{CATEGORY_LABELS[category]} ({len(tokens)}):")
            lines.extend(f"  {token}" for token in tokens)

    return "\n".join(lines)
