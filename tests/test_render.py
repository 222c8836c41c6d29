"""Tests for glyph mapping."""

import pytest

from banner_errors import InvalidInputError
from banner_render import (
    BannerResult,
    RenderConfig,
    RenderMode,
    create_render_config,
    render_bitmap,
)


class TestRenderConfig:
    """Tests for RenderConfig construction."""

    def test_defaults(self):
        config = create_render_config(['🔥'])
        assert config.foreground_emojis == ('🔥',)
        assert config.background_emoji is None
        assert config.mode is RenderMode.SOLID
        assert config.theme == 'default'

    def test_mode_from_string(self):
        assert create_render_config(['🔥'], mode='cycle').mode is RenderMode.CYCLE

    def test_invalid_mode(self):
        with pytest.raises(InvalidInputError):
            create_render_config(['🔥'], mode='sparkle')

    def test_empty_foreground_rejected(self):
        with pytest.raises(InvalidInputError):
            RenderConfig(foreground_emojis=())

    def test_theme_mode_without_levels_falls_back_to_solid(self):
        config = create_render_config(['🔥'], mode='theme', theme='default')
        assert config.mode is RenderMode.SOLID

    def test_theme_mode_unknown_theme_falls_back_to_solid(self):
        config = create_render_config(['🔥'], mode='theme', theme='neon')
        assert config.mode is RenderMode.SOLID

    def test_empty_background_means_none(self):
        assert create_render_config(['🔥'], background_emoji='').background_emoji is None

    def test_config_is_immutable(self):
        config = create_render_config(['🔥'])
        with pytest.raises(AttributeError):
            config.mode = RenderMode.CYCLE


class TestSolidMode:
    """Tests for solid rendering."""

    def test_hi_banner_shape(self, hi_grid, calc):
        config = create_render_config(['🟩'])
        result = render_bitmap(hi_grid, config, calc)

        lines = result.text.split('\n')
        assert len(lines) == 5
        assert result.height == 5
        assert {calc.get_width(line) for line in lines} == {20}

    def test_hi_banner_cells(self, hi_grid, calc):
        config = create_render_config(['🟩'])
        result = render_bitmap(hi_grid, config, calc)

        lines = result.lines
        assert lines[0] == "🟩      🟩" + "🟩" * 5
        assert lines[2] == "🟩" * 5 + "    🟩    "
        for line in lines:
            assert set(line) <= {"🟩", " "}

    def test_no_trailing_newline(self, hi_grid, calc):
        result = render_bitmap(hi_grid, create_render_config(['🟩']), calc)
        assert not result.text.endswith('\n')

    def test_blank_cells_match_widest_foreground(self, calc):
        grid = ((True, False),)
        result = render_bitmap(grid, create_render_config(['a', '🔥'], mode='solid'), calc)
        assert result.text == "a  "

    def test_background_emoji(self, calc):
        grid = ((True, False, True),)
        result = render_bitmap(grid, create_render_config(['🔥'], '⬛'), calc)
        assert result.text == "🔥⬛🔥"

    def test_lines_padded_to_equal_width(self, calc):
        grid = ((True,), (False,))
        result = render_bitmap(grid, create_render_config(['🔥'], '.'), calc)
        assert result.lines == ["🔥", ". "]


class TestCycleMode:
    """Tests for position-dependent cycling."""

    def test_cycle_order(self, calc):
        grid = ((True, True), (True, True))
        config = create_render_config(['A', 'B', 'C'], mode='cycle')

        result = render_bitmap(grid, config, calc)
        assert result.lines == ["AB", "CA"]

    def test_cycle_skips_blank_positions(self, calc):
        grid = ((True, False, True),)
        config = create_render_config(['A', 'B', 'C'], mode='cycle')

        # Index is row * width + col, blank cells still consume a position
        assert render_bitmap(grid, config, calc).text == "A C"

    def test_cycle_is_deterministic(self, hi_grid, calc):
        config = create_render_config(['🟥', '🟦', '🟨'], mode='cycle')
        first = render_bitmap(hi_grid, config, calc)
        second = render_bitmap(hi_grid, config, calc)
        assert first.text.encode() == second.text.encode()


class TestThemeMode:
    """Tests for themed rendering."""

    def test_github_theme_uses_theme_background(self, calc):
        grid = ((True, False),)
        config = create_render_config(['🔥'], 'X', mode='theme', theme='github')

        result = render_bitmap(grid, config, calc)
        assert result.text == "🟩⬜"

    def test_github_theme_ignores_foreground(self, hi_grid, calc):
        config = create_render_config(['🔥'], mode='theme', theme='github')
        result = render_bitmap(hi_grid, config, calc)

        assert '🔥' not in result.text
        assert '🟩' in result.text
        assert result.height == 5


class TestDegenerateGrids:
    """Tests for empty and invalid grids."""

    def test_empty_grid(self, calc):
        result = render_bitmap((), create_render_config(['🔥']), calc)
        assert result == BannerResult(text='')
        assert result.height == 0

    def test_zero_width_rows(self, calc):
        assert render_bitmap(((), ()), create_render_config(['🔥']), calc).text == ''

    def test_ragged_grid(self, calc):
        with pytest.raises(InvalidInputError):
            render_bitmap(((True, False), (True,)), create_render_config(['🔥']), calc)

    def test_accepts_lists(self, calc):
        assert render_bitmap([[True]], create_render_config(['🔥']), calc).text == "🔥"
