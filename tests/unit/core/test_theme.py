"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import filepilot.core.theme as theme_module
import pytest
from filepilot.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.directory == "#0e8ac8"
        assert colors.clipboard == "#faf870"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts #RGB and #RRGGBB codes."""
        colors = ThemeColors(directory="#AABBCC", selected="#abc")
        assert colors.directory == "#AABBCC"
        assert colors.selected == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(file="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ndirectory = "#000000"\n')

        assert _load_toml_colors(theme_file) == {"directory": "#000000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_ignores_non_string_values(self, tmp_path: Path) -> None:
        """Non-string values in the colors table are dropped."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nsize = 12\nfile = "#123456"\n')

        assert _load_toml_colors(theme_file) == {"file": "#123456"}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The bundled theme ships with the package."""
        assert Path(get_bundled_theme_path()).name == "theme.toml"

    def test_loads_bundled_theme(self) -> None:
        """Without a user theme the bundled colors are used."""
        colors = load_theme()

        assert colors.header == "#69B9A1"
        assert colors.selected == "#c1ff62"

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndirectory = "#ff0000"\n')

        with patch("filepilot.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.directory == "#ff0000"
        assert colors.file == "#ffffff"

    def test_invalid_user_color_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the default colors."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndirectory = "blue"\n')

        with patch("filepilot.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_includes_listing_styles(self) -> None:
        """Theme includes the styles used by entry tables."""
        theme = get_rich_theme(ThemeColors())

        for style in ("directory", "file", "size", "selected", "clipboard", "bold_header", "dim"):
            assert style in theme.styles

    def test_selected_is_reversed(self) -> None:
        """The selection style renders in reverse video."""
        theme = get_rich_theme(ThemeColors())
        assert theme.styles["selected"].reverse is True


class TestGetTheme:
    """Tests for get_theme caching function."""

    def test_caches_theme(self) -> None:
        """get_theme returns cached instance on subsequent calls."""
        theme_module._cached_theme = None

        theme1 = get_theme()
        theme2 = get_theme()

        assert isinstance(theme1, Theme)
        assert theme1 is theme2
