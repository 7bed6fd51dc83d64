"""Extraction model: the options consumed and the result produced by an extraction."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from elementary.stylesheet.categories import TokenCategory

MISSING_CSS_MESSAGE = "cssContent is required"


@dataclass(frozen=True)
class ExtractionOptions:
    """Inputs to a single extraction.

    Attributes:
        css_content: Full text of the component stylesheet. Required.
        css_file: Identifier of the stylesheet, echoed into the result.
        include_tokens: Whether to extract design tokens from *theme_content*.
        theme: Theme name, echoed into the result when tokens are extracted.
        theme_content: Full text of the theme stylesheet, if it was read.
    """

    css_content: str | None = None
    css_file: str | None = None
    include_tokens: bool = False
    theme: str = "polished"
    theme_content: str | None = None


@dataclass(frozen=True)
class ExtractionResult:
    """Classes and tokens extracted from one stylesheet, or an error."""

    css_file: str | None = None
    classes: tuple[str, ...] = ()
    tokens: tuple[str, ...] | None = None
    token_buckets: tuple[tuple[TokenCategory, tuple[str, ...]], ...] | None = None
    theme: str | None = None
    error: str | None = None

    @classmethod
    def failure(cls, message: str) -> ExtractionResult:
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def has_tokens(self) -> bool:
        return self.tokens is not None

    @property
    def tokens_by_category(self) -> Mapping[TokenCategory, tuple[str, ...]] | None:
        """Read-only view of the token buckets, in category order."""
        if self.token_buckets is None:
            return None
        return MappingProxyType(dict(self.token_buckets))

    @property
    def class_count(self) -> int:
        return len(self.classes)

    @property
    def token_count(self) -> int:
        return len(self.tokens) if self.tokens is not None else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON report shape.

        Token fields are present only when tokens were extracted; an error
        result carries nothing but ``error``.
        """
        if self.error is not None:
            return {"error": self.error}

        data: dict[str, Any] = {
            "css_file": self.css_file,
            "classes": list(self.classes),
            "class_count": self.class_count,
        }
        if self.tokens is not None:
            data["tokens"] = list(self.tokens)
            data["token_count"] = self.token_count
            data["tokens_by_category"] = {
                category.value: list((self.tokens_by_category or {}).get(category, ()))
                for category in TokenCategory
            }
            data["theme"] = self.theme
        return data
