# mapgen/viz.py

import os
import numpy as np
import matplotlib
matplotlib.use("Agg")  # server-safe backend
import matplotlib.pyplot as plt

from .grid import Grid, ENTRANCE, EXIT

ENTRANCE_RGB = (0, 200, 0)
EXIT_RGB = (220, 0, 0)


def tile_image(grid: Grid, tile_px: int = 18) -> np.ndarray:
    """RGB image of the grid: entrances green, exits red, terrain as a gray ramp."""
    img = np.zeros((grid.h, grid.w, 3), dtype=np.uint8)
    top = max(2, int(grid.cells.max()) if grid.cells.size else 2)
    span = max(1, top - 1)
    shade = (40 + 200 * (grid.cells - 2).clip(min=0) / span).astype(np.uint8)
    img[..., 0] = shade
    img[..., 1] = shade
    img[..., 2] = shade
    img[grid.cells == ENTRANCE] = ENTRANCE_RGB
    img[grid.cells == EXIT] = EXIT_RGB
    return np.repeat(np.repeat(img, tile_px, axis=0), tile_px, axis=1)


def render_grid_png(grid: Grid, out_path: str, tile_px: int = 18, title: str = ""):
    img = tile_image(grid, tile_px=tile_px)
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.figure()
    plt.imshow(img)
    plt.axis("off")
    if title:
        plt.title(title)
    plt.savefig(out_path, dpi=200, bbox_inches="tight", pad_inches=0)
    plt.close()


def plot_tile_counts(grid: Grid, out_path: str):
    codes, counts = np.unique(grid.cells, return_counts=True)
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    plt.figure()
    plt.bar([str(int(c)) for c in codes], counts)
    plt.xlabel("Tile code")
    plt.ylabel("Cells")
    plt.title("Tile usage")
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
