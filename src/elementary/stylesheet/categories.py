"""Token categorization by prefix convention."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

__all__ = ["TokenCategory", "categorize_tokens", "category_for"]


class TokenCategory(Enum):
    """Design token categories, in display order."""

    COLORS = "colors"
    BACKGROUNDS = "backgrounds"
    SPACING = "spacing"
    RADII = "radii"
    BORDERS = "borders"
    EFFECTS = "effects"
    TYPOGRAPHY = "typography"
    Z_INDEX = "zIndex"
    ANIMATION = "animation"
    OTHER = "other"


# Prefix (between the leading "--" and the next hyphen) -> category.
_PREFIX_TABLE: tuple[tuple[str, TokenCategory], ...] = (
    ("c", TokenCategory.COLORS),
    ("bg", TokenCategory.BACKGROUNDS),
    ("s", TokenCategory.SPACING),
    ("r", TokenCategory.RADII),
    ("b", TokenCategory.BORDERS),
    ("x", TokenCategory.EFFECTS),
    ("t", TokenCategory.TYPOGRAPHY),
    ("z", TokenCategory.Z_INDEX),
    ("a", TokenCategory.ANIMATION),
)

_BY_PREFIX: dict[str, TokenCategory] = dict(_PREFIX_TABLE)


def category_for(token: str) -> TokenCategory:
    """Return the category of a single ``--prefix-name`` token."""
    prefix, sep, _ = token.removeprefix("--").partition("-")
    if not sep:
        return TokenCategory.OTHER
    return _BY_PREFIX.get(prefix, TokenCategory.OTHER)


def categorize_tokens(tokens: Iterable[str]) -> dict[TokenCategory, tuple[str, ...]]:
    """Partition *tokens* into category buckets.

    Every category is present in the returned mapping, in ``TokenCategory``
    order. Each bucket keeps the relative order of *tokens*.
    """
    buckets: dict[TokenCategory, list[str]] = {category: [] for category in TokenCategory}
    for token in tokens:
        buckets[category_for(token)].append(token)
    return {category: tuple(members) for category, members in buckets.items()}
