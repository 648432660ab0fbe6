# mapgen/render.py
from __future__ import annotations
from typing import List

from .grid import Grid

INDENT = "\t\t"


def grid_table(grid: Grid) -> List[str]:
    """Tab separated table: a C1..Cn header row, then one R<i> row per grid row."""
    lines = [INDENT + " " + "".join(f"\tC{c + 1}" for c in range(grid.w))]
    for r, row in enumerate(grid.to_rows()):
        lines.append(INDENT + f"R{r + 1}" + "".join(f"\t{v}" for v in row))
    return lines


def dungeon_text(dungeon) -> str:
    lines = [dungeon.name, ""]
    lines.extend(grid_table(dungeon.grid))
    return "\n".join(lines) + "\n"
