# mapgen/io_utils.py

import os
import json

from .grid import Grid
from .dungeon import Dungeon


def save_dungeon_json(dungeon: Dungeon, out_dir: str, fname: str = "dungeon.json") -> str:
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, fname)
    with open(path, "w") as f:
        json.dump(dungeon.to_dict(), f, indent=2)
    return path


def load_grid_json(path: str) -> Grid:
    """Read a grid from either a bare list of rows or a saved dungeon document."""
    with open(path) as f:
        data = json.load(f)
    rows = data["grid"] if isinstance(data, dict) else data
    return Grid.from_rows(rows)


def save_dungeon_ascii(dungeon: Dungeon, out_dir: str, fname: str = "dungeon.txt") -> str:
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, fname)
    with open(path, "w") as f:
        f.write(str(dungeon))
    return path
