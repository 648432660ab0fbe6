# mapgen/dungeon.py

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from .diagnostics import DiagnosticSink
from .grid import Grid
from .params import DEFAULTS
from .render import dungeon_text
from .synth import MAX_REROLLS, synthesize
from .validate import validate_grid

DEFAULT_NAME = "THE DUNGEON"


@dataclass(frozen=True, eq=False)
class Dungeon:
    """A named map. Regeneration produces a new Dungeon, never edits this one.

    Dungeons compare and hash by identity; compare ``grid`` for map equality.
    """
    grid: Grid
    name: str = DEFAULT_NAME

    @classmethod
    def default(
        cls,
        rng=None,
        on_diagnostic: Optional[DiagnosticSink] = None,
        max_rerolls: int = MAX_REROLLS,
    ) -> "Dungeon":
        grid = synthesize(*DEFAULTS, rng=rng, on_diagnostic=on_diagnostic, max_rerolls=max_rerolls)
        return cls(grid, DEFAULT_NAME)

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        tile_types: int,
        entrance_max: int,
        exit_max: int,
        name: str,
        rng=None,
        on_diagnostic: Optional[DiagnosticSink] = None,
        max_rerolls: int = MAX_REROLLS,
    ) -> "Dungeon":
        grid = synthesize(
            width, height, tile_types, entrance_max, exit_max,
            rng=rng, on_diagnostic=on_diagnostic, max_rerolls=max_rerolls,
        )
        return cls(grid, name)

    @classmethod
    def from_grid(
        cls,
        grid: Union[Grid, Sequence[Sequence[int]]],
        name: str,
        rng=None,
        on_diagnostic: Optional[DiagnosticSink] = None,
        max_rerolls: int = MAX_REROLLS,
    ) -> "Dungeon":
        if not isinstance(grid, Grid):
            grid = Grid.from_rows(grid)
        return cls(validate_grid(grid, rng=rng, on_diagnostic=on_diagnostic, max_rerolls=max_rerolls), name)

    @property
    def width(self) -> int:
        return self.grid.w

    @property
    def height(self) -> int:
        return self.grid.h

    def to_dict(self):
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "grid": self.grid.to_rows(),
        }

    def __str__(self) -> str:
        return dungeon_text(self)
