import html
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .board import InvalidInputError, WIDTH
from .grid import END, START, Grid

LOG = logging.getLogger(__name__)

FORMATS = ("text", "html", "svg")

# Longest title that still fits between the corners once bracketed.
MAX_TITLE = WIDTH - 2

ESC = "\x1b"
ANSI_RESET = f"{ESC}[0m"
ANSI_COLORS: Dict[str, str] = {
    "start": f"{ESC}[32m",
    "end": f"{ESC}[31m",
    "border": f"{ESC}[36m",
}
HTML_COLORS: Dict[str, str] = {
    "start": "green",
    "end": "red",
    "border": "darkcyan",
}
SVG_COLORS: Dict[str, str] = {
    "start": "green",
    "end": "red",
    "border": "darkcyan",
}
SVG_WIDTH = 190
SVG_HEIGHT = 180
SVG_COL_PITCH = 10
SVG_ROW_PITCH = 15
SVG_FONT_SIZE = 14

# (character, role) where role is one of the color keys above, or None.
Glyph = Tuple[str, Optional[str]]


@dataclass(frozen=True)
class RenderOptions:
    title: str = ""
    format: str = "text"
    color: bool = False

    @classmethod
    def create(cls, title: str = "", format: str = "text", color: bool = False) -> "RenderOptions":
        """Validate loose option values and build options from them."""
        if not isinstance(title, str):
            raise InvalidInputError(f"title must be a string, got {type(title).__name__}")
        if not isinstance(format, str) or format not in FORMATS:
            raise InvalidInputError(f"format must be one of {', '.join(FORMATS)}, got {format!r}")
        if not isinstance(color, bool):
            raise InvalidInputError(f"color must be a boolean, got {type(color).__name__}")
        return cls(title=title, format=format, color=color)


# ----------------------------
# Layout
# ----------------------------

def border_line(title: str = "") -> str:
    return "".join(ch for ch, _ in _border(title))


def _border(title: str) -> List[Glyph]:
    line: List[Glyph] = [("+", "border")]
    if title and len(title) <= MAX_TITLE:
        framed = len(title) + 2
        left = (WIDTH - framed) // 2
        line += [("-", "border")] * left
        line.append(("[", "border"))
        line += [(ch, None) for ch in title]
        line.append(("]", "border"))
        line += [("-", "border")] * (WIDTH - framed - left)
    else:
        line += [("-", "border")] * WIDTH
    line.append(("+", "border"))
    return line


def _body(grid: Grid) -> List[List[Glyph]]:
    roles = {START: "start", END: "end"}
    lines = []
    for row in grid.rows():
        line: List[Glyph] = [("|", "border")]
        # S and E are not in the glyph table, so they can only be markers.
        line += [(ch, roles.get(ch)) for ch in row]
        line.append(("|", "border"))
        lines.append(line)
    return lines


def layout(grid: Grid, title: str = "") -> List[List[Glyph]]:
    """Every line of the framed art, top border to bottom border."""
    return [_border(title)] + _body(grid) + [_border("")]


def _runs(line: List[Glyph]) -> List[Tuple[str, Optional[str]]]:
    runs: List[Tuple[str, Optional[str]]] = []
    for ch, role in line:
        if runs and runs[-1][1] == role:
            runs[-1] = (runs[-1][0] + ch, role)
        else:
            runs.append((ch, role))
    return runs


# ----------------------------
# Formats
# ----------------------------

def to_text(lines: List[List[Glyph]], color: bool = False) -> str:
    out = []
    for line in lines:
        if color:
            out.append("".join(
                f"{ANSI_COLORS[role]}{text}{ANSI_RESET}" if role else text
                for text, role in _runs(line)
            ))
        else:
            out.append("".join(ch for ch, _ in line))
    return "\n".join(out) + "\n"


def to_html(lines: List[List[Glyph]], color: bool = False) -> str:
    out = []
    for line in lines:
        parts = []
        for text, role in _runs(line):
            text = html.escape(text)
            if color and role:
                text = f'<span style="color:{HTML_COLORS[role]}">{text}</span>'
            parts.append(text)
        out.append("".join(parts))
    return "<pre>" + "\n".join(out) + "\n</pre>"


def to_svg(lines: List[List[Glyph]], color: bool = False) -> str:
    out = [
        f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
        f'viewBox="0 0 {SVG_WIDTH} {SVG_HEIGHT}" width="{SVG_WIDTH}" height="{SVG_HEIGHT}">',
        f'<g font-family="monospace" font-size="{SVG_FONT_SIZE}px" xml:space="preserve">',
    ]
    for row, line in enumerate(lines):
        y = SVG_ROW_PITCH * (row + 1)
        for col, (ch, role) in enumerate(line):
            fill = SVG_COLORS[role] if color and role else "black"
            out.append(
                f'<text x="{SVG_COL_PITCH * col}" y="{y}" fill="{fill}">{html.escape(ch)}</text>'
            )
    out.append("</g>")
    out.append("</svg>")
    return "\n".join(out) + "\n"


RENDERERS = {
    "text": to_text,
    "html": to_html,
    "svg": to_svg,
}


def render(grid: Grid, format: str = "text", title: str = "", color: bool = False) -> str:
    """
    Frame the grid and serialize it.

    A title longer than MAX_TITLE characters is dropped and the top border
    falls back to a plain dashed line.
    """
    options = RenderOptions.create(title=title, format=format, color=color)
    if options.title and len(options.title) > MAX_TITLE:
        LOG.debug("title %r does not fit, dropped", options.title)
    LOG.debug("rendering %s (color=%s)", options.format, options.color)
    return RENDERERS[options.format](layout(grid, options.title), options.color)
