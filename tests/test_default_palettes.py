import pytest

from default_palettes import DEFAULT_RAMP_REFERENCES, get_default_palettes
from gamut import is_in_gamut
from luminance import STEP_VALUES
from oklch import hex_to_oklch


@pytest.fixture(scope="module")
def defaults():
    return get_default_palettes()


def test_names_and_order(defaults):
    assert [r.name for r in defaults] == [
        "Neutrals", "Very Peri", "Blue", "Green", "Yellow", "Orange", "Red", "Pink",
    ]


def test_every_reference_ramp_is_complete():
    for base_hex, references, _ in DEFAULT_RAMP_REFERENCES.values():
        assert set(references) == set(STEP_VALUES)
        assert references[450] == base_hex


def test_defaults_are_saved(defaults):
    assert all(r.is_saved for r in defaults)


def test_every_step_in_gamut(defaults):
    for ramp in defaults:
        assert [s.step for s in ramp.steps] == list(STEP_VALUES)
        for step in ramp.steps:
            assert is_in_gamut(step.oklch), (ramp.name, step.step, step.hex)


def test_pink_450_is_pinned(defaults):
    pink = next(r for r in defaults if r.name == "Pink")
    assert pink.hex_by_step()[450] == "#C27390"


def test_fresh_values_each_call(defaults):
    again = get_default_palettes()
    assert [r.id for r in again] != [r.id for r in defaults]
    assert [r.steps for r in again] == [r.steps for r in defaults]


@pytest.mark.parametrize("index", [0, 1, 12, 13])
def test_extreme_steps_follow_reference_chroma(defaults, index):
    for ramp in defaults:
        _, references, _ = DEFAULT_RAMP_REFERENCES[ramp.name]
        step = ramp.steps[index]
        assert step.oklch.c <= hex_to_oklch(references[step.step]).c + 1e-9
