"""
Generate OpenSSH fingerprint random art (the Drunken Bishop algorithm).
"""

from .art import Result, generate, try_generate
from .board import (
    HEIGHT,
    START_INDEX,
    WIDTH,
    InvalidInputError,
    coords_to_index,
    index_to_coords,
    parse_input,
)
from .grid import END, GLYPHS, MAX_VISITS, START, Grid, accumulate
from .image import render_image
from .render import FORMATS, RenderOptions, render
from .walk import STEP_TABLE, direction_codes, next_step, trace, walk, zone_of

__all__ = [
    "END",
    "FORMATS",
    "GLYPHS",
    "Grid",
    "HEIGHT",
    "InvalidInputError",
    "MAX_VISITS",
    "RenderOptions",
    "Result",
    "START",
    "START_INDEX",
    "STEP_TABLE",
    "WIDTH",
    "accumulate",
    "coords_to_index",
    "direction_codes",
    "generate",
    "index_to_coords",
    "next_step",
    "parse_input",
    "render",
    "render_image",
    "trace",
    "try_generate",
    "walk",
    "zone_of",
]
