# -*- coding: utf-8 -*-
"""
QR Grid Module

This module provides the module grid of a QR symbol together with the quiet
zone that surrounds it, and the small template grids (patterns) that function
pattern placers stamp onto it.

Coordinates come in two flavours:
    - symbol coordinates (row, col) with 0 <= row, col < size
    - grid indices, which include the quiet zone; symbol (r, c) is grid
      index (r + QUIET_ZONE_WIDTH, c + QUIET_ZONE_WIDTH)

Functions:
    symbol_size: Modules per side for a given version

Classes:
    Pattern: Fully reserved template built from a binary matrix
    Grid: Quiet-zone bordered module grid of one symbol
"""

import logging
from typing import Iterator, List, Sequence, Tuple

from .errors import GridSealed, IndexOutOfRange, InvalidVersion
from .module import Module, combine

logger = logging.getLogger(__name__)

QUIET_ZONE_WIDTH = 4
MIN_VERSION = 1
MAX_VERSION = 40
VERSION_1_SIZE = 21


def _check_version(version) -> int:
    if isinstance(version, bool) or not isinstance(version, int):
        raise InvalidVersion(version, MIN_VERSION, MAX_VERSION)
    if not MIN_VERSION <= version <= MAX_VERSION:
        raise InvalidVersion(version, MIN_VERSION, MAX_VERSION)
    return version


def symbol_size(version: int) -> int:
    """
    Calculate the number of modules per side of a symbol, quiet zone excluded.

    Args:
        version (int): QR code version (1-40)

    Returns:
        int: 21 for version 1, growing by 4 per version up to 177

    Raises:
        InvalidVersion: If version is not an integer in [1, 40]

    Example:
        >>> symbol_size(1), symbol_size(10), symbol_size(40)
        (21, 57, 177)
    """
    version = _check_version(version)
    return VERSION_1_SIZE + (version - 1) * 4


class Pattern:
    """
    Template grid for a function pattern.

    Templates carry no quiet zone and every cell is reserved, since a template
    always describes a function pattern.
    """

    def __init__(self, modules: Sequence[Sequence[Module]]):
        rows = tuple(tuple(row) for row in modules)
        if not rows or not rows[0]:
            raise ValueError("Pattern must have at least one module")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Pattern rows must all have the same length")
        self._rows = rows

    @classmethod
    def from_binary(cls, pattern: Sequence[Sequence[int]]) -> "Pattern":
        """
        Build a pattern from a literal 0/1 matrix.

        Example:
            >>> p = Pattern.from_binary([[1, 1], [1, 0]])
            >>> p.module_at(1, 1)
            Module(on=False, reserved=True)
        """
        return cls([[Module(on=bit == 1, reserved=True) for bit in row] for row in pattern])

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0])

    def module_at(self, row: int, col: int) -> Module:
        return self._rows[row][col]

    def __iter__(self) -> Iterator[Tuple[Module, ...]]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"Pattern({self.height}x{self.width})"


class Grid:
    """
    Module grid of one QR symbol, quiet zone included.

    Use Grid.new(version) to obtain a fully composed symbol skeleton. The bare
    constructor only allocates the grid and locks its quiet zone; it exists for
    placers and for combining hand-built layers.

    Attributes:
        version (int): QR code version (1-40)
        size (int): Modules per side, quiet zone excluded
        full_dimension (int): Modules per side, quiet zone included
    """

    def __init__(self, version: int):
        self.version = version
        self.size = symbol_size(version)
        self.full_dimension = self.size + 2 * QUIET_ZONE_WIDTH
        self._sealed = False
        self._rows: List[List[Module]] = [
            [Module() for _ in range(self.full_dimension)]
            for _ in range(self.full_dimension)
        ]
        self._lock_quiet_zone()

    @classmethod
    def new(cls, version: int) -> "Grid":
        """
        Build the skeleton of a QR symbol.

        The quiet zone is locked first, then the finder patterns are placed,
        then the timing patterns. Placement order is priority: cells a finder
        pattern has reserved keep their value when a timing stripe crosses them.

        Args:
            version (int): QR code version (1-40)

        Returns:
            Grid: Sealed grid holding quiet zone, finder and timing patterns

        Raises:
            InvalidVersion: If version is not an integer in [1, 40]

        Example:
            >>> grid = Grid.new(1)
            >>> grid.size, grid.full_dimension
            (21, 29)
            >>> grid.module_at(0, 0)
            Module(on=True, reserved=True)
        """
        from .functional_areas import place_finder_patterns, place_timing_patterns

        grid = cls(version)
        place_finder_patterns(grid)
        place_timing_patterns(grid)
        grid.seal()
        logger.debug("Built skeleton for version %d (%dx%d)", version, grid.size, grid.size)
        return grid

    def _lock_quiet_zone(self):
        edge = self.full_dimension - QUIET_ZONE_WIDTH
        for r in range(self.full_dimension):
            for c in range(self.full_dimension):
                if r < QUIET_ZONE_WIDTH or r >= edge or c < QUIET_ZONE_WIDTH or c >= edge:
                    self._rows[r][c] = Module(on=False, reserved=True)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self):
        """Freeze the grid; any later write raises GridSealed."""
        if not self._sealed:
            self._rows = tuple(tuple(row) for row in self._rows)
            self._sealed = True

    def _ensure_writable(self):
        if self._sealed:
            raise GridSealed(f"Grid for version {self.version} is sealed")

    def overlay(self, pattern: Pattern, row_offset: int, col_offset: int):
        """
        Combine a pattern onto the grid, cell by cell.

        Args:
            pattern (Pattern): Template to stamp
            row_offset (int): Grid row index of the template's top-left cell
            col_offset (int): Grid column index of the template's top-left cell

        Raises:
            GridSealed: If the grid has already been sealed
            IndexOutOfRange: If the template does not fit inside the grid
        """
        self._ensure_writable()
        limit = self.full_dimension
        if row_offset < 0 or col_offset < 0:
            raise IndexOutOfRange(row_offset, col_offset, limit)
        last_row = row_offset + pattern.height - 1
        last_col = col_offset + pattern.width - 1
        if last_row >= limit or last_col >= limit:
            raise IndexOutOfRange(last_row, last_col, limit)

        for tr, template_row in enumerate(pattern):
            grid_row = self._rows[row_offset + tr]
            for tc, source in enumerate(template_row):
                grid_row[col_offset + tc] = combine(grid_row[col_offset + tc], source)

    def __iadd__(self, other: "Grid") -> "Grid":
        self.add(other)
        return self

    def add(self, other: "Grid"):
        """
        Combine another grid onto this one over their common area.

        Both grids are aligned at their top-left grid index, so layers built
        for the same version line up module for module.
        """
        self._ensure_writable()
        common = min(self.full_dimension, other.full_dimension)
        other_rows = other.rows()
        for r in range(common):
            for c in range(common):
                self._rows[r][c] = combine(self._rows[r][c], other_rows[r][c])

    def module_at(self, row: int, col: int) -> Module:
        """
        Query a module in symbol coordinates (quiet zone excluded).

        Raises:
            IndexOutOfRange: If row or col is outside [0, size)
        """
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexOutOfRange(row, col, self.size)
        return self._rows[row + QUIET_ZONE_WIDTH][col + QUIET_ZONE_WIDTH]

    def grid_module_at(self, row: int, col: int) -> Module:
        """Query a module by grid index (quiet zone included)."""
        if not (0 <= row < self.full_dimension and 0 <= col < self.full_dimension):
            raise IndexOutOfRange(row, col, self.full_dimension)
        return self._rows[row][col]

    def rows(self) -> Tuple[Tuple[Module, ...], ...]:
        """Full-grid rows of modules, top to bottom."""
        if self._sealed:
            return self._rows
        return tuple(tuple(row) for row in self._rows)

    @property
    def matrix(self) -> Tuple[Tuple[bool, ...], ...]:
        """Symbol-space module values (True = dark), quiet zone excluded."""
        inner = slice(QUIET_ZONE_WIDTH, QUIET_ZONE_WIDTH + self.size)
        return tuple(tuple(m.on for m in row[inner]) for row in self._rows[inner])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.version == other.version and self.rows() == other.rows()

    def __hash__(self) -> int:
        if not self._sealed:
            raise TypeError("unhashable type: 'Grid' under construction")
        return hash((self.version, self._rows))

    def __str__(self) -> str:
        from .renderer import render_text

        return render_text(self)

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"Grid(version={self.version}, size={self.size}, {state})"
