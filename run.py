# run.py

import os
import random
import logging

from config import Config
from mapgen.dungeon import Dungeon
from mapgen.diagnostics import DiagnosticLog, log_diagnostic
from mapgen.io_utils import load_grid_json, save_dungeon_json, save_dungeon_ascii
from mapgen.synth import synthesize
from mapgen.viz import render_grid_png, plot_tile_counts


def build_dungeon(cfg: Config, on_diagnostic=None) -> Dungeon:
    rng = random.Random(cfg.seed)
    if cfg.grid_path:
        grid = load_grid_json(cfg.grid_path)
        return Dungeon.from_grid(grid, cfg.name, rng=rng, on_diagnostic=on_diagnostic, max_rerolls=cfg.max_rerolls)
    grid = synthesize(
        cfg.width, cfg.height, cfg.tile_types, cfg.entrance_max, cfg.exit_max,
        rng=rng, on_diagnostic=on_diagnostic, max_rerolls=cfg.max_rerolls,
    )
    return Dungeon(grid, cfg.name)


def main(cfg: Config = None):
    cfg = cfg or Config.from_env()
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    diags = DiagnosticLog()

    def on_diagnostic(d):
        diags(d)
        log_diagnostic(d)

    dungeon = build_dungeon(cfg, on_diagnostic=on_diagnostic)

    out_dir = cfg.out_dir
    os.makedirs(out_dir, exist_ok=True)

    save_dungeon_json(dungeon, out_dir)
    save_dungeon_ascii(dungeon, out_dir)
    render_grid_png(dungeon.grid, os.path.join(out_dir, "dungeon.png"), tile_px=cfg.tile_px, title=dungeon.name)
    plot_tile_counts(dungeon.grid, os.path.join(out_dir, "tile_counts.png"))

    print(dungeon)
    print(f"Size: {dungeon.width}x{dungeon.height}")
    print(f"Diagnostics: {', '.join(diags.kinds()) or 'none'}")
    print(f"Outputs saved to: ./{out_dir}/")
    return dungeon


if __name__ == "__main__":
    main()
