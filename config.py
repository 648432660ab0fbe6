# config.py

import os
from dataclasses import dataclass, fields
from typing import Optional

ENV_PREFIX = "DUNGEON_"


@dataclass
class Config:
    # Map
    width: int = 5
    height: int = 5
    tile_types: int = 6
    entrance_max: int = 1
    exit_max: int = 1
    name: str = "THE DUNGEON"

    # Randomness (None => unseeded)
    seed: Optional[int] = None
    max_rerolls: int = 10_000

    # Validate this JSON grid instead of generating one
    grid_path: Optional[str] = None

    # Output
    out_dir: str = "outputs"
    tile_px: int = 18
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """Defaults overridden by DUNGEON_<FIELD> variables, e.g. DUNGEON_WIDTH=8."""
        environ = os.environ if environ is None else environ
        cfg = cls()
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key not in environ:
                continue
            raw = environ[key]
            if f.name in ("seed", "grid_path") and raw == "":
                setattr(cfg, f.name, None)
            elif f.name in ("name", "grid_path", "out_dir", "log_level"):
                setattr(cfg, f.name, raw)
            else:
                setattr(cfg, f.name, int(raw))
        return cfg
