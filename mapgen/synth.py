# mapgen/synth.py

import random
from typing import Optional, Tuple

from .diagnostics import Diagnostic, DiagnosticSink, GRID_REPAIRED, emit
from .grid import Grid, ENTRANCE, EXIT
from .params import normalize_params

# Upper bound on draws for any single rejection-sampling loop.
MAX_REROLLS = 10_000


class GenerationError(RuntimeError):
    pass


def _saturated(code: int, ent_count: int, ext_count: int, entrance_max: int, exit_max: int) -> bool:
    return (code == ENTRANCE and ent_count >= entrance_max) or (code == EXIT and ext_count >= exit_max)


def draw_tile(rng, tile_types: int, ent_count: int, ext_count: int,
              entrance_max: int, exit_max: int, max_rerolls: int = MAX_REROLLS) -> int:
    code = rng.randrange(0, tile_types)
    tries = 1
    while _saturated(code, ent_count, ext_count, entrance_max, exit_max):
        if tries >= max_rerolls:
            raise GenerationError(f"No acceptable tile after {tries} draws (tile_types={tile_types})")
        code = rng.randrange(0, tile_types)
        tries += 1
    return code


def pick_cell(rng, grid: Grid) -> Tuple[int, int]:
    r = rng.randrange(0, grid.h)
    c = rng.randrange(0, grid.w)
    return r, c


def pick_cell_avoiding(rng, grid: Grid, protected_code: int, max_rerolls: int = MAX_REROLLS) -> Tuple[int, int]:
    for _ in range(max_rerolls):
        r, c = pick_cell(rng, grid)
        if grid.get(r, c) != protected_code:
            return r, c
    raise GenerationError(f"Could not find a cell that is not code {protected_code} in {max_rerolls} picks")


def repair(grid: Grid, rng, ent_count: int, ext_count: int,
           on_diagnostic: Optional[DiagnosticSink] = None, max_rerolls: int = MAX_REROLLS):
    """Guarantee at least one entrance and one exit, in place.

    A cell is picked up front; it is re-picked only when writing to it could
    destroy the last remaining cell of the other kind.
    """
    if ent_count and ext_count:
        return

    missing = tuple(name for name, n in (("entrance", ent_count), ("exit", ext_count)) if n == 0)
    emit(on_diagnostic, Diagnostic(GRID_REPAIRED, missing, "Missing entrance and/or exit, repairing"))

    r, c = pick_cell(rng, grid)
    if ent_count == 0:
        if ext_count < 2:
            r, c = pick_cell_avoiding(rng, grid, EXIT, max_rerolls)
        grid.set(r, c, ENTRANCE)

    if ext_count == 0:
        if ent_count < 2:
            r, c = pick_cell_avoiding(rng, grid, ENTRANCE, max_rerolls)
        grid.set(r, c, EXIT)


def synthesize(
    width: int = 5,
    height: int = 5,
    tile_types: int = 6,
    entrance_max: int = 1,
    exit_max: int = 1,
    *,
    rng=None,
    on_diagnostic: Optional[DiagnosticSink] = None,
    max_rerolls: int = MAX_REROLLS,
) -> Grid:
    """Build a fresh grid.

    ``rng`` is anything with ``randrange(start, stop)``; a new
    ``random.Random()`` is used when omitted.
    """
    width, height, tile_types, entrance_max, exit_max = normalize_params(
        width, height, tile_types, entrance_max, exit_max, on_diagnostic=on_diagnostic
    )
    if rng is None:
        rng = random.Random()

    grid = Grid(height, width)
    ent_count = 0
    ext_count = 0

    for r, c in grid.coords():
        code = draw_tile(rng, tile_types, ent_count, ext_count, entrance_max, exit_max, max_rerolls)
        if code == ENTRANCE:
            ent_count += 1
        elif code == EXIT:
            ext_count += 1
        grid.set(r, c, code)

    repair(grid, rng, ent_count, ext_count, on_diagnostic=on_diagnostic, max_rerolls=max_rerolls)
    return grid
