import random

import pytest

from mapgen.dungeon import DEFAULT_NAME, Dungeon
from mapgen.grid import Grid, ENTRANCE, EXIT
from mapgen.synth import GenerationError


def test_default_construction():
    d = Dungeon.default(rng=random.Random(11))
    assert d.name == DEFAULT_NAME == "THE DUNGEON"
    assert (d.width, d.height) == (5, 5)
    assert d.grid.count(ENTRANCE) >= 1
    assert d.grid.count(EXIT) >= 1


def test_parameterized_construction():
    d = Dungeon.build(8, 3, 4, 2, 3, "Crypt", rng=random.Random(2))
    assert d.name == "Crypt"
    assert d.grid.shape == (3, 8)
    assert 1 <= d.grid.count(ENTRANCE) <= 2
    assert 1 <= d.grid.count(EXIT) <= 3


def test_from_existing_grid_keeps_valid_map():
    rows = [[0, 2, 2], [2, 1, 2], [2, 2, 2]]
    g = Grid.from_rows(rows)
    d = Dungeon.from_grid(g, "Kept")
    assert d.grid is g
    assert d.name == "Kept"


def test_from_nested_lists_replaces_invalid_map(diags):
    d = Dungeon.from_grid([[0, 1], [1, 0]], "Rerolled", rng=random.Random(8), on_diagnostic=diags)
    assert d.name == "Rerolled"
    assert d.grid.shape == (2, 2)
    assert "grid_rejected" in diags.kinds()


def test_dungeon_is_frozen():
    d = Dungeon.default(rng=random.Random(0))
    with pytest.raises(AttributeError):
        d.name = "other"


def test_text_rendering_layout():
    d = Dungeon(Grid.from_rows([[0, 2, 3], [4, 1, 2]]), "Pit")
    assert str(d) == (
        "Pit\n"
        "\n"
        "\t\t \tC1\tC2\tC3\n"
        "\t\tR1\t0\t2\t3\n"
        "\t\tR2\t4\t1\t2\n"
    )


def test_to_dict():
    d = Dungeon(Grid.from_rows([[0, 1], [2, 2]]), "Den")
    assert d.to_dict() == {"name": "Den", "width": 2, "height": 2, "grid": [[0, 1], [2, 2]]}


class CappedLow:
    """Always answers the lowest value; fails the test if called too often."""

    def __init__(self, limit=50):
        self.limit = limit
        self.calls = 0

    def randrange(self, start, stop):
        self.calls += 1
        assert self.calls <= self.limit, "reroll cap was not honoured"
        return start


def test_dungeons_hash_by_identity():
    d = Dungeon.default(rng=random.Random(0))
    same_map = Dungeon(d.grid, d.name)
    assert hash(d) == hash(d)
    assert d != same_map
    assert len({d, same_map}) == 2


def test_build_honours_reroll_cap():
    with pytest.raises(GenerationError):
        Dungeon.build(2, 2, 3, 1, 1, "Stuck", rng=CappedLow(), max_rerolls=5)


def test_from_grid_honours_reroll_cap():
    # [[0, 1], [1, 0]] is rejected, and the replacement fill saturates immediately
    with pytest.raises(GenerationError):
        Dungeon.from_grid([[0, 1], [1, 0]], "Stuck", rng=CappedLow(), on_diagnostic=lambda d: None, max_rerolls=5)
