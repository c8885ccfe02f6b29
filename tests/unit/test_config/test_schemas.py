"""Unit tests for configuration schemas."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from velacritty.config.constants import MAX_SCROLLBACK_LINES
from velacritty.config.schemas import (
    ColorsConfig,
    CursorConfig,
    FontConfig,
    ScrollingConfig,
    TerminalConfig,
    UiConfig,
    WindowConfig,
)
from velacritty.config.schemas.base import CursorShape, Decorations, Osc52
from velacritty.config.schemas.terminal import Program


class TestScrollingConfig:
    """Tests for ScrollingConfig schema."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Test the default scrolling settings."""
        config = ScrollingConfig()

        assert config.history == 10_000
        assert config.multiplier == 3
        assert config.auto_scroll is True

    @pytest.mark.unit
    def test_history_at_maximum_accepted(self) -> None:
        """Test that exactly the maximum history is valid."""
        config = ScrollingConfig(history=MAX_SCROLLBACK_LINES)
        assert config.history == 100_000

    @pytest.mark.unit
    def test_history_above_maximum_rejected(self) -> None:
        """Test that one line above the maximum fails."""
        with pytest.raises(ValidationError) as exc_info:
            ScrollingConfig(history=MAX_SCROLLBACK_LINES + 1)

        message = str(exc_info.value)
        assert "exceeded maximum scrolling history" in message
        assert "100001/100000" in message

    @pytest.mark.unit
    def test_zero_history_disables_scrollback(self) -> None:
        """Test that zero history is allowed."""
        assert ScrollingConfig(history=0).history == 0

    @pytest.mark.unit
    def test_negative_history_rejected(self) -> None:
        """Test that negative history fails."""
        with pytest.raises(ValidationError):
            ScrollingConfig(history=-1)

    @pytest.mark.unit
    def test_auto_scroll_disabled(self) -> None:
        """Test that auto_scroll can be turned off."""
        config = ScrollingConfig.model_validate({"auto_scroll": False})
        assert config.auto_scroll is False

    @pytest.mark.unit
    @pytest.mark.parametrize("multiplier", [-1, 256])
    def test_multiplier_bounds(self, multiplier: int) -> None:
        """Test that the multiplier must fit in 0..255."""
        with pytest.raises(ValidationError):
            ScrollingConfig(multiplier=multiplier)

    @pytest.mark.unit
    def test_wrong_type_rejected(self) -> None:
        """Test that a non-numeric history fails."""
        with pytest.raises(ValidationError):
            ScrollingConfig.model_validate({"history": "lots"})

    @pytest.mark.unit
    def test_frozen(self) -> None:
        """Test that scrolling config is immutable."""
        config = ScrollingConfig()
        with pytest.raises(ValidationError):
            config.history = 5  # type: ignore[misc]


class TestWindowConfig:
    """Tests for WindowConfig schema."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Test window defaults."""
        config = WindowConfig()

        assert config.opacity == 1.0
        assert config.padding.x == 0
        assert config.decorations == Decorations.FULL
        assert config.title == "Velacritty"

    @pytest.mark.unit
    @pytest.mark.parametrize("opacity", [-0.1, 1.5])
    def test_opacity_out_of_range(self, opacity: float) -> None:
        """Test that opacity must be within 0..1."""
        with pytest.raises(ValidationError):
            WindowConfig(opacity=opacity)

    @pytest.mark.unit
    def test_enum_from_string(self) -> None:
        """Test that enum values are parsed from their config spelling."""
        config = WindowConfig.model_validate(
            {"decorations": "Buttonless", "startup_mode": "Maximized"}
        )
        assert config.decorations == Decorations.BUTTONLESS
        assert config.startup_mode.value == "Maximized"

    @pytest.mark.unit
    def test_unknown_enum_rejected(self) -> None:
        """Test that misspelled enum values fail."""
        with pytest.raises(ValidationError):
            WindowConfig.model_validate({"decorations": "full"})

    @pytest.mark.unit
    def test_partial_padding_keeps_defaults(self) -> None:
        """Test that nested tables fill missing fields with defaults."""
        config = WindowConfig.model_validate({"padding": {"y": 4}})
        assert (config.padding.x, config.padding.y) == (0, 4)


class TestFontConfig:
    """Tests for FontConfig schema."""

    @pytest.mark.unit
    def test_size_must_be_positive(self) -> None:
        """Test that a zero font size fails."""
        with pytest.raises(ValidationError):
            FontConfig(size=0)

    @pytest.mark.unit
    def test_face_defaults(self) -> None:
        """Test that every face defaults to monospace."""
        config = FontConfig.model_validate({"normal": {"family": "Fira Code"}})

        assert config.normal.family == "Fira Code"
        assert config.bold.family == "monospace"
        assert config.bold.style is None


class TestCursorConfig:
    """Tests for CursorConfig schema."""

    @pytest.mark.unit
    def test_style_parsed(self) -> None:
        """Test cursor style parsing."""
        config = CursorConfig.model_validate(
            {"style": {"shape": "Beam", "blinking": "Always"}}
        )

        assert config.style.shape == CursorShape.BEAM
        assert config.vi_mode_style is None

    @pytest.mark.unit
    def test_thickness_bounds(self) -> None:
        """Test that thickness is a fraction of the cell."""
        with pytest.raises(ValidationError):
            CursorConfig(thickness=2.0)


class TestColorsConfig:
    """Tests for ColorsConfig schema."""

    @pytest.mark.unit
    @pytest.mark.parametrize("color", ["#1e1e2e", "0x1E1E2E"])
    def test_hex_colors_accepted(self, color: str) -> None:
        """Test both supported hex spellings."""
        config = ColorsConfig.model_validate({"primary": {"background": color}})
        assert config.primary.background == color

    @pytest.mark.unit
    @pytest.mark.parametrize("color", ["red", "#fff", "#12345g"])
    def test_invalid_colors_rejected(self, color: str) -> None:
        """Test that other color spellings fail."""
        with pytest.raises(ValidationError):
            ColorsConfig.model_validate({"primary": {"foreground": color}})

    @pytest.mark.unit
    def test_cell_colors_accept_keywords(self) -> None:
        """Test the CellForeground/CellBackground keywords."""
        config = ColorsConfig.model_validate(
            {"cursor": {"text": "CellForeground", "cursor": "#ffffff"}}
        )
        assert config.cursor.text == "CellForeground"

    @pytest.mark.unit
    def test_partial_palette_override(self) -> None:
        """Test that overriding one ANSI color keeps the rest."""
        config = ColorsConfig.model_validate({"normal": {"red": "#ff0000"}})

        assert config.normal.red == "#ff0000"
        assert config.normal.green == "#90a959"

    @pytest.mark.unit
    def test_search_colors_pass_through(self) -> None:
        """Test that renderer-specific tables are kept as-is."""
        search = {"matches": {"foreground": "#000000", "background": "#ffffff"}}
        config = ColorsConfig.model_validate({"search": search})
        assert config.search == search


class TestTerminalConfig:
    """Tests for TerminalConfig schema."""

    @pytest.mark.unit
    def test_default_osc52(self) -> None:
        """Test that OSC 52 defaults to copy only."""
        assert TerminalConfig().osc52 == Osc52.ONLY_COPY

    @pytest.mark.unit
    def test_shell_as_string(self) -> None:
        """Test the bare string shell form."""
        assert TerminalConfig.model_validate({"shell": "/bin/zsh"}).shell == "/bin/zsh"

    @pytest.mark.unit
    def test_shell_as_program(self) -> None:
        """Test the program-with-arguments shell form."""
        config = TerminalConfig.model_validate(
            {"shell": {"program": "/bin/bash", "args": ["-l"]}}
        )
        assert config.shell == Program(program="/bin/bash", args=["-l"])


class TestUiConfig:
    """Tests for the root UiConfig schema."""

    @pytest.mark.unit
    def test_empty_document_is_all_defaults(self) -> None:
        """Test that an empty document validates."""
        config = UiConfig.model_validate({})

        assert config.scrolling == ScrollingConfig()
        assert config.config_paths == []

    @pytest.mark.unit
    def test_unknown_keys_ignored(self) -> None:
        """Test that unknown keys do not fail validation."""
        config = UiConfig.model_validate({"nonsense": 1, "scrolling": {"bogus": 2}})
        assert config.scrolling.history == 10_000

    @pytest.mark.unit
    def test_to_tree_omits_none_and_paths(self) -> None:
        """Test that the tree dump is TOML compatible."""
        tree = UiConfig().to_tree()

        assert "config_paths" not in tree
        assert "vi_mode_style" not in tree["cursor"]
        assert tree["scrolling"] == {
            "multiplier": 3,
            "auto_scroll": True,
            "history": 10_000,
        }
        assert tree["window"]["decorations"] == "Full"

    @pytest.mark.unit
    def test_to_tree_revalidates(self) -> None:
        """Test that a dumped tree validates back to an equal config."""
        config = UiConfig.model_validate(
            {"scrolling": {"history": 42}, "general": {"working_directory": "/tmp"}}
        )

        assert UiConfig.model_validate(config.to_tree()) == config

    @pytest.mark.unit
    def test_checksum_stable(self) -> None:
        """Test that equal configs share a checksum."""
        first = UiConfig.model_validate({"scrolling": {"history": 1}})
        second = UiConfig.model_validate({"scrolling": {"history": 1}})
        third = UiConfig.model_validate({"scrolling": {"history": 2}})

        assert first.compute_checksum() == second.compute_checksum()
        assert first.compute_checksum() != third.compute_checksum()
        assert len(first.compute_checksum()) == 64

    @pytest.mark.unit
    def test_checksum_ignores_config_paths(self) -> None:
        """Test that provenance does not affect the checksum."""
        plain = UiConfig()
        tracked = UiConfig(config_paths=[Path("/cfg/velacritty.toml")])

        assert plain.compute_checksum() == tracked.compute_checksum()
