# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module places the function patterns of the symbol skeleton onto a grid:
the three finder patterns (with their separators) and the two timing
patterns. Both placers go through Grid.overlay, so the quiet zone and any
module reserved by an earlier placer are left untouched.

Functions:
    finder_pattern_offsets: Grid indices where the finder template is stamped
    finder_positions: Symbol coordinates of the three 7x7 finder markers
    place_finder_patterns: Stamp the three finder patterns
    timing_pattern: Build one alternating timing stripe
    place_timing_patterns: Stamp the horizontal and vertical timing stripes
    build_function_mask: Reserved flags of a grid in symbol coordinates
"""

import logging
from typing import List, Tuple

from .grid import QUIET_ZONE_WIDTH, Grid, Pattern

logger = logging.getLogger(__name__)

FINDER_SIZE = 7
TIMING_INDEX = 6

# Finder pattern plus its 1-module separator on every side:
#          000000000
#          011111110
#          010000010
#          010111010
#          010111010
#          010111010
#          010000010
#          011111110
#          000000000
FINDER_PATTERN = (
    (0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 1, 1, 1, 1, 1, 1, 1, 0),
    (0, 1, 0, 0, 0, 0, 0, 1, 0),
    (0, 1, 0, 1, 1, 1, 0, 1, 0),
    (0, 1, 0, 1, 1, 1, 0, 1, 0),
    (0, 1, 0, 1, 1, 1, 0, 1, 0),
    (0, 1, 0, 0, 0, 0, 0, 1, 0),
    (0, 1, 1, 1, 1, 1, 1, 1, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0),
)

# The separator row/column on the outer edge lands on the quiet zone.
_FINDER_OFFSET = QUIET_ZONE_WIDTH - 1


def finder_pattern_offsets(size: int) -> List[Tuple[int, int]]:
    """
    Calculate where the 9x9 finder template is stamped, as grid indices.

    Args:
        size (int): Symbol size in modules (21 for v1, 25 for v2, etc.)

    Returns:
        List[Tuple[int, int]]: (row, col) of the template's top-left cell for
            the top-left, top-right and bottom-left markers

    Example:
        >>> finder_pattern_offsets(21)
        [(3, 3), (3, 17), (17, 3)]
    """
    far = size - FINDER_SIZE + _FINDER_OFFSET
    return [
        (_FINDER_OFFSET, _FINDER_OFFSET),
        (_FINDER_OFFSET, far),
        (far, _FINDER_OFFSET),
    ]


def finder_positions(size: int) -> List[Tuple[int, int]]:
    """Symbol coordinates of the top-left corner of each 7x7 finder marker."""
    return [(0, 0), (0, size - FINDER_SIZE), (size - FINDER_SIZE, 0)]


def place_finder_patterns(grid: Grid):
    """
    Stamp the three finder patterns onto the grid.

    Every template cell is reserved, so each touched free module takes the
    template's value and becomes reserved. Template cells falling on the
    quiet zone are ignored because the quiet zone is already reserved.
    """
    template = Pattern.from_binary(FINDER_PATTERN)
    for row_offset, col_offset in finder_pattern_offsets(grid.size):
        grid.overlay(template, row_offset, col_offset)
    logger.debug("Placed finder patterns for size %d", grid.size)


def timing_pattern(length: int, horizontal: bool = True) -> Pattern:
    """
    Build an alternating one-module-wide timing stripe.

    Module i is dark when i is even. Every module is reserved.

    Example:
        >>> [m.on for m in next(iter(timing_pattern(5)))]
        [True, False, True, False, True]
    """
    bits = [1 if i % 2 == 0 else 0 for i in range(length)]
    if horizontal:
        return Pattern.from_binary([bits])
    return Pattern.from_binary([[bit] for bit in bits])


def place_timing_patterns(grid: Grid):
    """
    Stamp the timing stripes at symbol row 6 and symbol column 6.

    Must run after place_finder_patterns: where a stripe crosses a finder
    pattern or its separator, the finder's reserved modules win.
    """
    offset = QUIET_ZONE_WIDTH + TIMING_INDEX
    grid.overlay(timing_pattern(grid.size, horizontal=True), offset, QUIET_ZONE_WIDTH)
    grid.overlay(timing_pattern(grid.size, horizontal=False), QUIET_ZONE_WIDTH, offset)
    logger.debug("Placed timing patterns for size %d", grid.size)


def build_function_mask(grid: Grid) -> List[List[bool]]:
    """
    Build a mask identifying function modules of the symbol.

    Returns:
        List[List[bool]]: func_mask[r][c] = True if module (r, c) was reserved
            by a function pattern (symbol coordinates, quiet zone excluded)

    Example:
        >>> func_mask = build_function_mask(Grid.new(1))
        >>> func_mask[0][0], func_mask[10][10]
        (True, False)
    """
    return [
        [grid.module_at(r, c).reserved for c in range(grid.size)]
        for r in range(grid.size)
    ]


# Skeleton layout (version 1, 21x21 modules, quiet zone not shown):
"""
   0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0
 0 F F F F F F F S . . . . . S F F F F F F F
 1 F F F F F F F S . . . . . S F F F F F F F
 2 F F F F F F F S . . . . . S F F F F F F F
 3 F F F F F F F S . . . . . S F F F F F F F
 4 F F F F F F F S . . . . . S F F F F F F F
 5 F F F F F F F S . . . . . S F F F F F F F
 6 F F F F F F F S T T T T T S F F F F F F F
 7 S S S S S S S S . . . . . S S S S S S S S
 8 . . . . . . T . . . . . . . . . . . . . .
 9 . . . . . . T . . . . . . . . . . . . . .
10 . . . . . . T . . . . . . . . . . . . . .
11 . . . . . . T . . . . . . . . . . . . . .
12 . . . . . . T . . . . . . . . . . . . . .
13 S S S S S S S S . . . . . . . . . . . . .
14 F F F F F F F S . . . . . . . . . . . . .
15 F F F F F F F S . . . . . . . . . . . . .
16 F F F F F F F S . . . . . . . . . . . . .
17 F F F F F F F S . . . . . . . . . . . . .
18 F F F F F F F S . . . . . . . . . . . . .
19 F F F F F F F S . . . . . . . . . . . . .
20 F F F F F F F S . . . . . . . . . . . . .

Legend:
F = Finder pattern (7x7)
S = Separator (1-module light border around finders)
T = Timing pattern (row/col 6)
. = Free module (data area, left to external collaborators)
"""
