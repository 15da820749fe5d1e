# -*- coding: utf-8 -*-
"""
QR Skeleton Renderer Module

This module turns a finished grid into text, PNG or SVG output. All output is
produced in memory; writing it anywhere is up to the caller.

The text rendering follows the terminal convention of the skeleton: a light
(blank) glyph for modules that are on and a filled glyph for modules that are
off. Image renderings paint modules that are on in the dark colour.

Functions:
    render_text: Double-width glyph rendering of the full grid
    classify_modules: Zone name of every module of the full grid
    render_png_from_grid: Black and white PNG
    render_colored_png_from_grid: Zone-coloured PNG with metrics
    render_colored_svg_from_grid: Zone-coloured SVG
"""

import base64
from io import BytesIO
from typing import Any, Dict, List, Tuple

from PIL import Image, ImageDraw

from .functional_areas import FINDER_SIZE, TIMING_INDEX, finder_positions
from .grid import QUIET_ZONE_WIDTH, Grid

LIGHT_GLYPH = "  "
DARK_GLYPH = "██"

# Color palette for skeleton zone visualization
PALETTE = {
    'background': (255, 255, 255),    # White background
    'quiet': (245, 245, 245),         # Near white - Quiet zone
    'finder': (128, 0, 128),          # Purple - Finder patterns (3 corners)
    'separator': (230, 230, 230),     # Light gray - Separators around finders
    'timing': (255, 165, 0),          # Orange - Timing patterns (row/col 6)
    'free': (35, 35, 35),             # Dark gray - Modules left for data
}

ZONES = ('quiet', 'finder', 'separator', 'timing', 'free')


def render_text(grid: Grid, light: str = LIGHT_GLYPH, dark: str = DARK_GLYPH) -> str:
    """
    Render the full grid, quiet zone included, as text.

    Each module becomes one glyph: `light` when the module is on, `dark` when
    it is off. Rows are emitted top to bottom, each followed by a newline.

    Example:
        >>> text = render_text(Grid.new(1))
        >>> len(text.splitlines())
        29
    """
    lines = []
    for row in grid.rows():
        lines.append("".join(light if module.on else dark for module in row))
        lines.append("\n")
    return "".join(lines)


def classify_modules(grid: Grid) -> List[List[str]]:
    """
    Name the zone each module of the full grid belongs to.

    Returns:
        List[List[str]]: zones[r][c] in ZONES, indexed by grid index
    """
    n = grid.full_dimension
    zones = [['free'] * n for _ in range(n)]
    markers = [
        (r0 + QUIET_ZONE_WIDTH, c0 + QUIET_ZONE_WIDTH)
        for (r0, c0) in finder_positions(grid.size)
    ]
    timing = QUIET_ZONE_WIDTH + TIMING_INDEX
    edge = n - QUIET_ZONE_WIDTH
    rows = grid.rows()

    for r in range(n):
        for c in range(n):
            if r < QUIET_ZONE_WIDTH or r >= edge or c < QUIET_ZONE_WIDTH or c >= edge:
                zones[r][c] = 'quiet'
                continue
            if not rows[r][c].reserved:
                continue
            zone = None
            for (r0, c0) in markers:
                if r0 <= r < r0 + FINDER_SIZE and c0 <= c < c0 + FINDER_SIZE:
                    zone = 'finder'
                    break
                if r0 - 1 <= r <= r0 + FINDER_SIZE and c0 - 1 <= c <= c0 + FINDER_SIZE:
                    zone = 'separator'
            if zone is None and (r == timing or c == timing):
                zone = 'timing'
            zones[r][c] = zone or 'free'
    return zones


def _check_scale(scale: int):
    if scale < 1:
        raise ValueError(f"scale must be a positive integer, got {scale}")


def render_png_from_grid(
    grid: Grid,
    scale: int = 10,
    light: Tuple[int, int, int] = (255, 255, 255),
    dark: Tuple[int, int, int] = (0, 0, 0)
) -> bytes:
    """
    Render the full grid as a black and white PNG.

    Args:
        grid (Grid): Finished skeleton
        scale (int): Pixel size per module
        light (Tuple[int, int, int]): RGB colour of modules that are off
        dark (Tuple[int, int, int]): RGB colour of modules that are on

    Returns:
        bytes: PNG file content
    """
    _check_scale(scale)
    img_px = grid.full_dimension * scale
    img = Image.new('RGB', (img_px, img_px), light)
    draw = ImageDraw.Draw(img)

    for r, row in enumerate(grid.rows()):
        for c, module in enumerate(row):
            if module.on:
                x0 = c * scale
                y0 = r * scale
                draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=dark)

    buf = BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


def _metrics(grid: Grid, zones: List[List[str]]) -> Dict[str, Any]:
    rows = grid.rows()
    inner = range(QUIET_ZONE_WIDTH, QUIET_ZONE_WIDTH + grid.size)
    dark = sum(1 for r in inner for c in inner if rows[r][c].on)
    reserved = sum(1 for r in inner for c in inner if rows[r][c].reserved)
    counts = {zone: sum(row.count(zone) for row in zones) for zone in ZONES}
    return {
        'version': grid.version,
        'size': grid.size,
        'full_dimension': grid.full_dimension,
        'modules': grid.size * grid.size,
        'dark_modules': dark,
        'reserved_modules': reserved,
        'free_modules': grid.size * grid.size - reserved,
        'border': QUIET_ZONE_WIDTH,
        'zones': counts,
    }


def render_colored_png_from_grid(grid: Grid, scale: int = 6) -> Tuple[str, Dict[str, Any]]:
    """
    Render the grid as a zone-coloured PNG.

    Dark modules are painted with their zone colour; light separator modules
    are painted light gray so the separators stand out.

    Returns:
        Tuple[str, Dict[str, Any]]: (base64_png, metrics_dict)

    Example:
        >>> b64, metrics = render_colored_png_from_grid(Grid.new(2))
        >>> metrics['size'], metrics['full_dimension']
        (25, 33)
    """
    _check_scale(scale)
    zones = classify_modules(grid)
    img_px = grid.full_dimension * scale
    img = Image.new('RGB', (img_px, img_px), PALETTE['background'])
    draw = ImageDraw.Draw(img)

    for r, row in enumerate(grid.rows()):
        for c, module in enumerate(row):
            zone = zones[r][c]
            if module.on:
                fill = PALETTE[zone]
            elif zone in ('separator', 'quiet'):
                fill = PALETTE[zone]
            else:
                continue
            x0 = c * scale
            y0 = r * scale
            draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=fill)

    buf = BytesIO()
    img.save(buf, format='PNG')
    b64 = base64.b64encode(buf.getvalue()).decode('ascii')
    return b64, _metrics(grid, zones)


def render_colored_svg_from_grid(grid: Grid, scale: int = 10) -> bytes:
    """
    Render the grid as a zone-coloured SVG.

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    _check_scale(scale)
    zones = classify_modules(grid)
    px = grid.full_dimension * scale

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="rgb{PALETTE["background"]}"/>')

    for r, row in enumerate(grid.rows()):
        for c, module in enumerate(row):
            zone = zones[r][c]
            if not module.on and zone not in ('separator', 'quiet'):
                continue
            x = c * scale
            y = r * scale
            out.append(f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}" fill="rgb{PALETTE[zone]}"/>')

    out.append('</svg>')
    return "\n".join(out).encode("utf-8")
