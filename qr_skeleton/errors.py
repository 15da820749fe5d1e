# -*- coding: utf-8 -*-
"""
QR Skeleton Errors Module

All errors are raised synchronously, before any grid state is changed.

Classes:
    SkeletonError: Base class for every error raised by this package
    InvalidVersion: Version outside the supported 1..40 range
    IndexOutOfRange: Module coordinate outside the grid
    GridSealed: Write attempted on a grid whose construction has finished
"""

from typing import Any


class SkeletonError(Exception):
    """Base class for QR skeleton errors."""


class InvalidVersion(SkeletonError, ValueError):
    def __init__(self, version: Any, minimum: int = 1, maximum: int = 40):
        self.version = version
        super().__init__(
            f"Invalid QR version {version!r}: expected an integer in [{minimum}, {maximum}]"
        )


class IndexOutOfRange(SkeletonError, IndexError):
    def __init__(self, row: int, col: int, limit: int):
        self.row = row
        self.col = col
        self.limit = limit
        super().__init__(f"Module ({row}, {col}) is outside [0, {limit})")


class GridSealed(SkeletonError, RuntimeError):
    """Raised when a finished grid is written to."""
