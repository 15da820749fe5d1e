import dataclasses
import itertools

import pytest

from qr_skeleton.module import Module, combine

ALL_MODULES = [Module(on=on, reserved=reserved) for on, reserved in itertools.product([False, True], repeat=2)]


RESERVED = [m for m in ALL_MODULES if m.reserved]


@pytest.mark.parametrize("destination,source", itertools.product(RESERVED, ALL_MODULES))
def test_reserved_destination_ignores_source(destination, source):
    assert combine(destination, source) == destination


@pytest.mark.parametrize("template_cell", [Module(on=True, reserved=True), Module(on=False, reserved=True)])
def test_stamping_free_light_module_yields_template_cell(template_cell):
    assert combine(Module(), template_cell) == template_cell


def test_free_modules_combine_xor_wise():
    bit = combine(Module(), Module(on=True))
    assert bit == Module(on=True, reserved=False)

    bit = combine(bit, Module(on=True, reserved=True))
    assert bit == Module(on=False, reserved=True)


def test_reserved_module_is_idempotent_under_repeated_overlay():
    bit = Module(on=False, reserved=True)
    for source in ALL_MODULES * 3:
        bit = combine(bit, source)
    assert bit == Module(on=False, reserved=True)


def test_add_operator_matches_combine():
    assert Module() + Module(on=True, reserved=True) == Module(on=True, reserved=True)
    assert Module(reserved=True) + Module(on=True) == Module(reserved=True)


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Module() + 1


def test_module_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Module().on = True
