import base64
from io import BytesIO

import pytest
from PIL import Image

from qr_skeleton import Grid
from qr_skeleton.renderer import (
    DARK_GLYPH,
    LIGHT_GLYPH,
    PALETTE,
    classify_modules,
    render_colored_png_from_grid,
    render_colored_svg_from_grid,
    render_png_from_grid,
    render_text,
)


def test_render_text_layout(v1):
    text = render_text(v1)
    lines = text.split("\n")
    assert text.endswith("\n")
    assert lines[-1] == ""
    assert len(lines) - 1 == 29
    assert all(len(line) == 29 * 2 for line in lines[:-1])


def test_render_text_glyphs(v1):
    lines = render_text(v1).splitlines()
    # Quiet zone is off, so it renders with the dark glyph.
    assert lines[0] == DARK_GLYPH * 29
    # Symbol row 0: top-left marker ring is on, separator is off.
    row = lines[4]
    assert row[8:10] == LIGHT_GLYPH
    assert row[(4 + 7) * 2:(4 + 8) * 2] == DARK_GLYPH


def test_str_is_text_rendering(v1):
    assert str(v1) == render_text(v1)


def test_render_text_custom_glyphs(v1):
    text = render_text(v1, light="1", dark="0")
    assert text.splitlines()[4] == "0000" + "1111111" + "0" + "00000" + "0" + "1111111" + "0000"


def test_classify_modules_v1(v1):
    zones = classify_modules(v1)
    counts = {zone: sum(row.count(zone) for row in zones) for zone in PALETTE if zone != 'background'}
    assert counts['quiet'] == 29 * 29 - 21 * 21
    assert counts['finder'] == 3 * 49
    assert counts['separator'] == 3 * 15
    assert counts['timing'] == 10
    assert counts['free'] == 21 * 21 - 3 * 64 - 10
    assert zones[4][4] == 'finder'
    assert zones[4 + 6][4 + 7] == 'separator'
    assert zones[4 + 6][4 + 8] == 'timing'


def test_render_png_dimensions_and_colours(v1):
    png = render_png_from_grid(v1, scale=3)
    img = Image.open(BytesIO(png)).convert('RGB')
    assert img.size == (29 * 3, 29 * 3)
    assert img.getpixel((0, 0)) == (255, 255, 255)
    assert img.getpixel((4 * 3, 4 * 3)) == (0, 0, 0)
    assert img.getpixel((5 * 3 + 1, 5 * 3 + 1)) == (255, 255, 255)


def test_render_colored_png_metrics():
    grid = Grid.new(2)
    b64, metrics = render_colored_png_from_grid(grid, scale=2)
    img = Image.open(BytesIO(base64.b64decode(b64))).convert('RGB')
    assert img.size == (33 * 2, 33 * 2)
    assert img.getpixel((4 * 2, 4 * 2)) == PALETTE['finder']
    assert img.getpixel((0, 0)) == PALETTE['quiet']
    assert metrics['size'] == 25
    assert metrics['full_dimension'] == 33
    assert metrics['modules'] == 625
    assert metrics['border'] == 4
    assert metrics['reserved_modules'] == 3 * 64 + 2 * 9
    assert metrics['free_modules'] == 625 - metrics['reserved_modules']
    assert metrics['dark_modules'] == 3 * 33 + 2 * 5


def test_render_colored_svg(v1):
    svg = render_colored_svg_from_grid(v1, scale=5).decode('utf-8')
    assert svg.startswith('<?xml')
    assert 'width="145"' in svg
    assert f'fill="rgb{PALETTE["finder"]}"' in svg
    assert f'fill="rgb{PALETTE["timing"]}"' in svg
    assert svg.rstrip().endswith('</svg>')


@pytest.mark.parametrize("render", [render_png_from_grid, render_colored_png_from_grid, render_colored_svg_from_grid])
def test_scale_must_be_positive(v1, render):
    with pytest.raises(ValueError):
        render(v1, scale=0)
