# -*- coding: utf-8 -*-
"""
QR Skeleton - Symbol Matrix Compositor

This package builds the fixed skeleton of QR-style symbols: a module grid
bordered by a locked quiet zone, carrying the three finder patterns and the
two timing patterns. Patterns are stamped with a merge rule in which reserved
modules can never be overwritten, so placement order sets priority.

Modules:
    module: Module value type and the combine merge rule
    grid: Grid and Pattern, symbol sizing and quiet zone
    functional_areas: Finder and timing pattern placement
    renderer: Text, PNG and SVG rendering
    errors: Exception hierarchy
"""

__version__ = "1.0.0"
__author__ = "QR Skeleton Team"

from .errors import SkeletonError, InvalidVersion, IndexOutOfRange, GridSealed
from .module import Module, combine
from .grid import Grid, Pattern, symbol_size, QUIET_ZONE_WIDTH, MIN_VERSION, MAX_VERSION
from .functional_areas import build_function_mask, place_finder_patterns, place_timing_patterns
from .renderer import (
    render_text,
    render_png_from_grid,
    render_colored_png_from_grid,
    render_colored_svg_from_grid,
)

new = Grid.new

__all__ = [
    'new',
    'Grid',
    'Pattern',
    'Module',
    'combine',
    'symbol_size',
    'QUIET_ZONE_WIDTH',
    'MIN_VERSION',
    'MAX_VERSION',
    'build_function_mask',
    'place_finder_patterns',
    'place_timing_patterns',
    'render_text',
    'render_png_from_grid',
    'render_colored_png_from_grid',
    'render_colored_svg_from_grid',
    'SkeletonError',
    'InvalidVersion',
    'IndexOutOfRange',
    'GridSealed',
]
