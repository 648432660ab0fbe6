# mapgen/validate.py

from dataclasses import dataclass
from typing import Optional

from .diagnostics import Diagnostic, DiagnosticSink, GRID_REJECTED, emit
from .grid import Grid, ENTRANCE, EXIT
from .params import GenParams, normalize_sequence
from .synth import MAX_REROLLS, synthesize


@dataclass
class GridStats:
    width: int
    height: int
    tile_types: int
    entrances: int
    exits: int

    def as_params(self) -> GenParams:
        return GenParams(self.width, self.height, self.tile_types, self.entrances, self.exits)


def grid_stats(grid: Grid) -> GridStats:
    # tile_types is the number of distinct codes present, not the largest code + 1
    return GridStats(
        width=grid.w,
        height=grid.h,
        tile_types=grid.distinct(),
        entrances=grid.count(ENTRANCE),
        exits=grid.count(EXIT),
    )


def validate_grid(
    grid: Grid,
    *,
    rng=None,
    on_diagnostic: Optional[DiagnosticSink] = None,
    max_rerolls: int = MAX_REROLLS,
) -> Grid:
    """Return ``grid`` itself if its derived parameters survive normalization,
    otherwise a freshly synthesized grid built from the corrected parameters.

    Derived entrance/exit counts are only held to the minimum of one; a grid
    with several entrances is accepted as long as nothing else is off.
    """
    derived = grid_stats(grid).as_params()
    adjusted = normalize_sequence(derived, on_diagnostic=on_diagnostic)
    if adjusted == derived:
        return grid

    changed = tuple(name for name, a, b in zip(GenParams._fields, derived, adjusted) if a != b)
    emit(on_diagnostic, Diagnostic(GRID_REJECTED, changed, "Invalid dungeon map submitted, map re-rolled"))
    return synthesize(*adjusted, rng=rng, on_diagnostic=on_diagnostic, max_rerolls=max_rerolls)
