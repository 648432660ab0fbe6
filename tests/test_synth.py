import random

import pytest

from mapgen.diagnostics import GRID_REPAIRED, PARAMS_CORRECTED
from mapgen.grid import ENTRANCE, EXIT
from mapgen.synth import GenerationError, synthesize


class AlwaysLow:
    def randrange(self, start, stop):
        return start


def assert_invariants(grid, w, h, t, e_max, x_max):
    assert grid.shape == (h, w)
    assert grid.cells.min() >= 0 and grid.cells.max() < t
    assert 1 <= grid.count(ENTRANCE) <= e_max
    assert 1 <= grid.count(EXIT) <= x_max


@pytest.mark.parametrize("params", [
    (2, 2, 3, 1, 1),
    (5, 5, 6, 1, 1),
    (3, 7, 3, 2, 1),
    (8, 4, 12, 3, 5),
    (20, 20, 4, 1, 1),
    (2, 9, 50, 1, 2),
])
def test_synthesis_invariants_over_seeds(params):
    for seed in range(60):
        grid = synthesize(*params, rng=random.Random(seed), on_diagnostic=lambda d: None)
        assert_invariants(grid, *params)


def test_low_params_are_normalized_before_filling(diags):
    grid = synthesize(0, 1, 2, 0, 0, rng=random.Random(3), on_diagnostic=diags)
    assert_invariants(grid, 5, 5, 6, 1, 1)
    assert diags.events[0].kind == PARAMS_CORRECTED


def test_same_seed_same_grid():
    a = synthesize(6, 4, 5, 2, 2, rng=random.Random(99))
    b = synthesize(6, 4, 5, 2, 2, rng=random.Random(99))
    assert a == b


def test_default_source_is_used_when_none_given():
    grid = synthesize()
    assert_invariants(grid, 5, 5, 6, 1, 1)


def test_saturated_codes_are_redrawn(scripted, diags):
    rng = scripted([0, 0, 0, 2, 1, 1, 1, 2])
    grid = synthesize(2, 2, 3, 1, 1, rng=rng, on_diagnostic=diags)
    assert grid.to_rows() == [[0, 2], [1, 2]]
    assert rng.values == []
    assert diags.events == []


def test_repair_never_overwrites_sole_exit(scripted, diags):
    # fill: exit then three terrain tiles; first pick (0,0), re-picks (0,0) (the exit) then (1,1)
    rng = scripted([1, 2, 2, 2, 0, 0, 0, 0, 1, 1])
    grid = synthesize(2, 2, 3, 1, 1, rng=rng, on_diagnostic=diags)
    assert grid.to_rows() == [[1, 2], [2, 0]]
    assert grid.get(0, 0) == EXIT
    assert rng.values == []
    assert diags.kinds() == [GRID_REPAIRED]
    assert diags.events[0].fields == ("entrance",)


def test_repair_never_overwrites_sole_entrance(scripted):
    rng = scripted([2, 0, 2, 2, 1, 1, 0, 1, 0, 0])
    grid = synthesize(2, 2, 3, 1, 1, rng=rng, on_diagnostic=lambda d: None)
    assert grid.to_rows() == [[1, 0], [2, 2]]
    assert rng.values == []


def test_repair_places_both_when_both_missing(scripted, diags):
    rng = scripted([2, 2, 2, 2, 1, 1, 0, 1, 0, 1, 1, 0])
    grid = synthesize(2, 2, 3, 1, 1, rng=rng, on_diagnostic=diags)
    assert grid.to_rows() == [[2, 0], [1, 2]]
    assert rng.values == []
    assert diags.events[0].fields == ("entrance", "exit")


def test_repair_uses_first_pick_when_exits_to_spare(scripted):
    rng = scripted([1, 1, 2, 2, 0, 0])
    grid = synthesize(2, 2, 3, 1, 2, rng=rng, on_diagnostic=lambda d: None)
    assert grid.to_rows() == [[0, 1], [2, 2]]
    assert rng.values == []


def test_reroll_cap_raises_for_broken_source():
    with pytest.raises(GenerationError):
        synthesize(2, 2, 3, 1, 1, rng=AlwaysLow(), max_rerolls=50)
