"""Configuration loading and defaults for burrow."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence

# Environment variables consulted, in order, before the configured editor
EDITOR_VARIABLES = ("BURROW_EDITOR", "EDITOR")


def get_config_dir() -> Path:
    """Get the burrow config directory (XDG-style)."""
    return Path.home() / ".config" / "burrow"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


@dataclass
class ColorConfig:
    """Colors of the cursor, the location bar and the search filter."""

    cursor: str = "#825DF2"
    bar: str = "#5C5C5C"
    search: str = "#499F1C"
    foreground: str = "#FFFFFF"


@dataclass
class Config:
    """Application configuration."""

    editor: str = "less"
    search_timeout: float = 2.0
    tab_width: int = 4
    column_gap: int = 4
    show_hidden: bool = True
    log_file: str = ""
    colors: ColorConfig = field(default_factory=ColorConfig)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        colors_data = data.get("colors", {})
        colors = ColorConfig(
            cursor=colors_data.get("cursor", ColorConfig.cursor),
            bar=colors_data.get("bar", ColorConfig.bar),
            search=colors_data.get("search", ColorConfig.search),
            foreground=colors_data.get("foreground", ColorConfig.foreground),
        )

        return cls(
            editor=data.get("editor", "less"),
            search_timeout=float(data.get("search_timeout", 2.0)),
            tab_width=int(data.get("tab_width", 4)),
            column_gap=int(data.get("column_gap", 4)),
            show_hidden=bool(data.get("show_hidden", True)),
            log_file=data.get("log_file", ""),
            colors=colors,
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            "# burrow configuration",
            "",
            "# Editor used when $BURROW_EDITOR and $EDITOR are unset",
            f'editor = "{self.editor}"',
            "",
            "# Seconds of inactivity before type-to-select search ends",
            f"search_timeout = {self.search_timeout}",
            "",
            "# Spaces a tab expands to in the preview pane",
            f"tab_width = {self.tab_width}",
            "",
            "# Spaces between grid columns",
            f"column_gap = {self.column_gap}",
            "",
            "# List dot-files",
            f"show_hidden = {str(self.show_hidden).lower()}",
            "",
            "# Write debug logs here (empty = no logging)",
            f'log_file = "{self.log_file}"',
            "",
            "[colors]",
            f'cursor = "{self.colors.cursor}"',
            f'bar = "{self.colors.bar}"',
            f'search = "{self.colors.search}"',
            f'foreground = "{self.colors.foreground}"',
        ]

        config_path.write_text("\n".join(lines) + "\n")


def resolve_editor(
    fallback: str,
    names: Sequence[str] = EDITOR_VARIABLES,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the editor program: the first non-empty variable, else fallback."""
    if environ is None:
        environ = os.environ
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return fallback
