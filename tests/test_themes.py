"""Tests for theme definitions."""

import pytest

from banner_themes import (
    THEMES,
    Theme,
    get_available_themes,
    get_theme,
    get_theme_background,
    get_theme_description,
    get_theme_emojis,
    github_intensity,
    is_valid_theme,
)


class TestGithubIntensity:
    """Tests for the contribution level hash."""

    @pytest.mark.parametrize("row,col,seed,expected", [
        (0, 0, 0, 1),    # 0
        (0, 1, 0, 1),    # 17
        (0, 2, 0, 2),    # 34
        (1, 1, 0, 3),    # 48
        (1, 2, 0, 3),    # 65
        (1, 3, 0, 4),    # 82
        (0, 0, 20, 2),   # 20
        (0, 0, 75, 4),   # 75
        (3, 0, 7, 1),    # 100 -> 0
    ])
    def test_levels(self, row, col, seed, expected):
        assert github_intensity(row, col, seed) == expected

    def test_always_in_range(self):
        for row in range(20):
            for col in range(60):
                assert 1 <= github_intensity(row, col) <= 4


class TestThemeLookup:
    """Tests for theme registry helpers."""

    def test_available_themes(self):
        assert get_available_themes() == ['default', 'github']

    def test_is_valid_theme(self):
        assert is_valid_theme('github')
        assert not is_valid_theme('neon')

    def test_unknown_theme_falls_back_to_default(self):
        assert get_theme('neon') is THEMES['default']
        assert get_theme_emojis('neon') == ['🔥']

    def test_backgrounds(self):
        assert get_theme_background('github') == '⬜'
        assert get_theme_background('default') == '  '
        assert get_theme_background('neon') == '  '

    def test_descriptions(self):
        assert 'GitHub' in get_theme_description('github')
        assert get_theme_description('neon') == 'Unknown theme'

    def test_github_glyphs(self):
        theme = get_theme('github')
        assert theme.has_intensity
        assert theme.levels[0] == '⬜'
        assert all(theme.levels[level] == '🟩' for level in range(1, 5))

    def test_default_theme_has_no_intensity(self):
        theme = get_theme('default')
        assert not theme.has_intensity
        assert theme.glyph_for(3, 4) == '🔥'

    def test_registry_tables_are_read_only(self):
        theme = get_theme('github')

        with pytest.raises(TypeError):
            theme.levels[1] = '🔥'
        with pytest.raises(AttributeError):
            theme.emojis.append('🔥')
        assert get_theme('github').glyph_for(0, 0) == '🟩'

    def test_theme_copies_caller_tables(self):
        levels = {1: '🟦'}
        theme = Theme(name='blue', description='Blue', emojis=['🟦'],
                      levels=levels, intensity=lambda row, col, seed: 1)
        levels[1] = '🟥'

        assert theme.emojis == ('🟦',)
        assert theme.glyph_for(0, 0) == '🟦'
