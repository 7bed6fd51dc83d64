from __future__ import annotations

from pathlib import Path

import pytest

from elementary.config import ElementaryConfig
from elementary.errors import ConfigError


class TestElementaryConfig:
    def test_defaults(self) -> None:
        config = ElementaryConfig()
        assert config.skill_root == "."
        assert config.theme == "polished"
        assert config.output_format == "human"
        assert config.include_tokens is False

    def test_is_frozen(self) -> None:
        config = ElementaryConfig()
        with pytest.raises(AttributeError):
            config.theme = "other"  # type: ignore[misc]

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ConfigError):
            ElementaryConfig(output_format="xml")

    @pytest.mark.parametrize("theme", ["", "../secret", "a\\b"])
    def test_bad_theme_rejected(self, theme: str) -> None:
        with pytest.raises(ConfigError):
            ElementaryConfig(theme=theme)

    def test_theme_path(self) -> None:
        config = ElementaryConfig(skill_root="/skill", theme="high-fidelity")
        assert config.theme_path() == Path("/skill/assets/elementary/tokens/high-fidelity.css")

    def test_resolve_css_path(self) -> None:
        config = ElementaryConfig(skill_root="/skill")
        assert config.resolve_css_path("assets/elementary/components.css") == Path(
            "/skill/assets/elementary/components.css"
        )
        assert config.resolve_css_path("/abs/file.css") == Path("/abs/file.css")
