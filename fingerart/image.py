import logging
import math
from typing import Tuple

from PIL import Image

from .board import HEIGHT, WIDTH
from .grid import END, MAX_VISITS, START, Grid

LOG = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREEN = (0, 160, 0)
RED = (200, 0, 0)


def _shade(visits: int) -> Tuple[int, int, int]:
    if visits <= 0:
        return WHITE
    norm = math.log1p(visits) / math.log1p(MAX_VISITS)
    shade = 255 - int(norm * 240)
    shade = 0 if shade < 0 else (255 if shade > 255 else shade)
    return shade, shade, shade


def render_image(grid: Grid, scale: int = 16, color: bool = False) -> Image.Image:
    """
    Raster version of the art: one scale x scale square per cell.

    Value comes from the visit count on a log scale, so a single visit is
    still visible next to a capped cell. Start and end cells are black, or
    green and red when color is set.
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    markers = {
        START: GREEN if color else BLACK,
        END: RED if color else BLACK,
    }

    img = Image.new("RGB", (WIDTH * scale, HEIGHT * scale), WHITE)
    for y in range(HEIGHT):
        for x in range(WIDTH):
            cell = grid.at(x, y)
            fill = markers[cell] if isinstance(cell, str) else _shade(cell)
            if fill != WHITE:
                img.paste(fill, (x * scale, y * scale, (x + 1) * scale, (y + 1) * scale))

    LOG.debug("rendered %dx%d image", img.width, img.height)
    return img
