"""Property-based tests for width math, rendering and frame arithmetic."""

from hypothesis import given, settings, strategies as st

from banner_marquee import compose_frame
from banner_render import create_render_config, render_bitmap
from banner_width import WidthCalculator

calc = WidthCalculator(strategy='heuristic', enable_cache=False)

mixed_text = st.text(alphabet=st.sampled_from("ab #🔥🟩⬜"), max_size=30)
ascii_text = st.text(alphabet=st.characters(min_codepoint=0x20, max_codepoint=0x7e), max_size=40)


@st.composite
def pixel_grids(draw, max_side=8):
    height = draw(st.integers(min_value=1, max_value=max_side))
    width = draw(st.integers(min_value=1, max_value=max_side))
    row = st.lists(st.booleans(), min_size=width, max_size=width)
    return tuple(tuple(r) for r in draw(st.lists(row, min_size=height, max_size=height)))


@given(mixed_text, mixed_text)
def test_width_is_additive(a, b):
    assert calc.get_width(a + b) == calc.get_width(a) + calc.get_width(b)


@given(mixed_text)
def test_width_never_below_code_point_count(text):
    assert calc.get_width(text) >= len(text)


@given(st.lists(st.sampled_from(["a", " ", "#", "🔥", "🟩", "⬜"]), max_size=20), st.data())
def test_substrings_compose_at_glyph_boundaries(glyphs, data):
    text = "".join(glyphs)
    total = calc.get_width(text)
    split = data.draw(st.integers(min_value=0, max_value=len(glyphs)))
    k = calc.get_width("".join(glyphs[:split]))

    head = calc.visible_substring(text, 0, k)
    tail = calc.visible_substring(text, k, total - k)

    assert head + tail == text


@given(mixed_text, st.integers(min_value=0, max_value=60))
def test_pad_reaches_target_and_is_idempotent(text, target):
    padded = calc.pad(text, target)

    assert calc.get_width(padded) == max(calc.get_width(text), target)
    assert padded.startswith(text)
    assert calc.pad(padded, target) == padded


@given(ascii_text, st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=50))
def test_ascii_substring_is_slicing(text, start, length):
    assert calc.visible_substring(text, start, length) == text[start:start + length]


@given(st.integers(min_value=0, max_value=12),
       st.integers(min_value=0, max_value=14),
       st.integers(min_value=0, max_value=14))
def test_wide_substring_on_even_columns(count, cell, cells):
    text = '🔥' * count
    expected = '🔥' * min(cells, max(0, count - cell))
    assert calc.visible_substring(text, cell * 2, cells * 2) == expected


@given(pixel_grids())
def test_render_shape(grid):
    result = render_bitmap(grid, create_render_config(['🔥']), calc)

    assert result.height == len(grid)
    assert [calc.get_width(line) for line in result.lines] == [2 * len(grid[0])] * len(grid)


@given(pixel_grids(), st.integers(min_value=0, max_value=1000))
def test_cycle_render_is_deterministic(grid, seed):
    config = create_render_config(['🟥', '🟩', '🟦'], '⬜', 'cycle', seed=seed)
    assert render_bitmap(grid, config, calc) == render_bitmap(grid, config, calc)


@settings(max_examples=10, deadline=None)
@given(pixel_grids(max_side=5), st.integers(min_value=1, max_value=30))
def test_every_frame_fills_terminal(grid, terminal_width):
    lines = render_bitmap(grid, create_render_config(['🔥'], '⬜'), calc).lines
    max_width = max(calc.get_width(line) for line in lines)

    for frame in range(terminal_width + max_width):
        composed = compose_frame(lines, frame, terminal_width, calc)
        assert len(composed) == len(lines)
        assert all(calc.get_width(line) >= terminal_width for line in composed)
        # at most one extra column from a wide glyph straddling the edge
        assert all(calc.get_width(line) <= terminal_width + 1 for line in composed)
