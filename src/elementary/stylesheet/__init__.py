from elementary.stylesheet.scanner import extract_classes, extract_tokens
from elementary.stylesheet.categories import TokenCategory, categorize_tokens, category_for

__all__ = [
    "extract_classes",
    "extract_tokens",
    "TokenCategory",
    "categorize_tokens",
    "category_for",
]
