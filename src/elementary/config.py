from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from elementary.errors import ConfigError
from elementary.model.installation import ASSETS_SUFFIX

OUTPUT_FORMATS = ("human", "json")


@dataclass(frozen=True)
class ElementaryConfig:
    skill_root: str = "."
    theme: str = "polished"  # name of a file under assets/elementary/tokens/
    output_format: str = "human"  # "human" or "json"
    include_tokens: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format {self.output_format!r}; "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if not self.theme or "/" in self.theme or "\\" in self.theme:
            raise ConfigError(f"Invalid theme name: {self.theme!r}")

    @property
    def assets_dir(self) -> Path:
        return Path(self.skill_root).joinpath(*ASSETS_SUFFIX)

    def theme_path(self) -> Path:
        return self.assets_dir / "tokens" / f"{self.theme}.css"

    def resolve_css_path(self, css_file: str) -> Path:
        """Resolve *css_file* against the skill root; absolute paths pass through."""
        return Path(self.skill_root) / css_file
