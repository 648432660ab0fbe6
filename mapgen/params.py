# mapgen/params.py

from typing import NamedTuple, Optional, Sequence

from .diagnostics import Diagnostic, DiagnosticSink, PARAMS_CORRECTED, emit


class GenParams(NamedTuple):
    width: int
    height: int
    tile_types: int
    entrance_max: int
    exit_max: int


# At smallest, a 2x2 map with entrance, exit and one terrain code can exist.
MINIMUMS = GenParams(width=2, height=2, tile_types=3, entrance_max=1, exit_max=1)
DEFAULTS = GenParams(width=5, height=5, tile_types=6, entrance_max=1, exit_max=1)


def normalize_params(
    width: int,
    height: int,
    tile_types: int,
    entrance_max: int,
    exit_max: int,
    on_diagnostic: Optional[DiagnosticSink] = None,
) -> GenParams:
    given = GenParams(width, height, tile_types, entrance_max, exit_max)
    fixed = []
    out = []
    for name, value, lo, default in zip(GenParams._fields, given, MINIMUMS, DEFAULTS):
        if value < lo:
            out.append(default)
            fixed.append(name)
        else:
            out.append(value)

    if fixed:
        emit(on_diagnostic, Diagnostic(PARAMS_CORRECTED, tuple(fixed), "Invalid parameters replaced with defaults"))
    return GenParams(*out)


def normalize_sequence(params: Sequence[int], on_diagnostic: Optional[DiagnosticSink] = None) -> GenParams:
    """Same as normalize_params, for an ordered (width, height, tile_types, entrance_max, exit_max) sequence."""
    return normalize_params(*params, on_diagnostic=on_diagnostic)
