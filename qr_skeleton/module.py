# -*- coding: utf-8 -*-
"""
QR Module Value Type

A module is a single cell of the symbol: an on/off value plus a reservation
lock. Function patterns reserve the modules they write so that nothing applied
later (another function pattern, data, a mask) can change them.

Functions:
    combine: Merge a source module onto a destination module
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Module:
    """
    One cell of the symbol grid.

    Attributes:
        on (bool): True if the module renders in the dark symbol colour
        reserved (bool): True once a function pattern has fixed the value
    """

    on: bool = False
    reserved: bool = False

    def __add__(self, other: "Module") -> "Module":
        if not isinstance(other, Module):
            return NotImplemented
        return combine(self, other)


def combine(destination: Module, source: Module) -> Module:
    """
    Combine a source module onto a destination module.

    A reserved destination is returned unchanged and the source is ignored
    (first writer wins). Otherwise the values are XORed and the reservation
    flags ORed, so stamping a template cell onto a free, light module yields
    the template cell itself.

    Args:
        destination (Module): Module already on the grid
        source (Module): Module being overlaid

    Returns:
        Module: The merged module

    Example:
        >>> combine(Module(), Module(on=True, reserved=True))
        Module(on=True, reserved=True)
        >>> combine(Module(reserved=True), Module(on=True))
        Module(on=False, reserved=True)
    """
    if destination.reserved:
        return destination
    return Module(
        on=destination.on != source.on,
        reserved=destination.reserved or source.reserved,
    )
