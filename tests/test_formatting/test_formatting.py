"""Tests for human and JSON report formatting."""

from __future__ import annotations

import json

from elementary.extraction import extract_design_data
from elementary.formatting import format_human, format_json
from elementary.model import ExtractionOptions, ExtractionResult


def _result(include_tokens: bool = True) -> ExtractionResult:
    return extract_design_data(
        ExtractionOptions(
            css_content=".btn {}\n.card {}\n",
            css_file="components.css",
            include_tokens=include_tokens,
            theme="polished",
            theme_content=":root { --c-primary: #000; --z-modal: 10; }",
        )
    )


class TestFormatJson:
    def test_round_trips_to_dict(self) -> None:
        result = _result()
        assert json.loads(format_json(result)) == result.to_dict()

    def test_error(self) -> None:
        assert json.loads(format_json(ExtractionResult.failure("nope"))) == {"error": "nope"}


class TestFormatHuman:
    def test_error(self) -> None:
        assert format_human(ExtractionResult.failure("nope")) == "Error: nope"

    def test_classes_listed(self) -> None:
        output = format_human(_result(include_tokens=False))
        assert "CSS File: components.css" in output
        assert "Component Classes (2):" in output
        assert "  .btn" in output
        assert "Design Tokens" not in output

    def test_tokens_grouped_by_category(self) -> None:
        output = format_human(_result())
        assert "Design Tokens (2) from polished theme:" in output
        assert "Colors (1):" in output
        assert "Z-Index (1):" in output
        assert "  --c-primary" in output

    def test_empty_categories_omitted(self) -> None:
        output = format_human(_result())
        assert "Spacing" not in output
        assert "Other" not in output
