"""Tests for framing and serializing the art."""

import re

import pytest

from fingerart.board import InvalidInputError
from fingerart.grid import accumulate
from fingerart.render import RenderOptions, border_line, render
from fingerart.walk import trace

FINGERPRINT = bytes.fromhex("fc94b0c1e5b0987c5843997697ee9fb7")

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def grid():
    return accumulate(trace(FINGERPRINT))


class TestBorder:
    """Tests for the top and bottom border lines."""

    def test_plain(self) -> None:
        assert border_line() == "+-----------------+"

    def test_title_centered(self) -> None:
        assert border_line("nonsense") == "+---[nonsense]----+"

    def test_longest_title(self) -> None:
        assert border_line("x" * 15) == "+[" + "x" * 15 + "]+"

    def test_title_too_long(self) -> None:
        assert border_line("x" * 16) == "+-----------------+"

    def test_short_title(self) -> None:
        assert border_line("a") == "+-------[a]-------+"


class TestText:
    """Tests for plain text output."""

    def test_shape(self, grid) -> None:
        art = render(grid)
        assert art.endswith("\n")
        lines = art[:-1].split("\n")
        assert len(lines) == 11
        assert all(len(line) == 19 for line in lines)
        assert lines[0] == lines[-1]

    def test_markers_once(self, grid) -> None:
        body = "".join(line[1:-1] for line in render(grid).split("\n")[1:-2])
        assert body.count("S") == 1
        assert body.count("E") == 1

    def test_long_title_dropped(self, grid) -> None:
        lines = render(grid, title="a title that is far too long").split("\n")
        assert lines[0] == lines[-2] == "+-----------------+"


class TestColor:
    """Tests for ANSI colored text."""

    def test_start_wrapped(self, grid) -> None:
        art = render(grid, color=True)
        assert "\x1b[32mS\x1b[0m" in art
        assert "\x1b[31mE\x1b[0m" in art

    def test_border_cyan(self, grid) -> None:
        lines = render(grid, color=True).split("\n")
        assert lines[0] == "\x1b[36m+-----------------+\x1b[0m"
        assert lines[1] == "\x1b[36m|\x1b[0m       .=o.  .   \x1b[36m|\x1b[0m"

    def test_title_text_not_colored(self, grid) -> None:
        line = render(grid, title="key", color=True).split("\n")[0]
        assert line == "\x1b[36m+------[\x1b[0mkey\x1b[36m]------+\x1b[0m"

    def test_strips_to_plain(self, grid) -> None:
        assert ANSI_RE.sub("", render(grid, title="t", color=True)) == render(grid, title="t")

    def test_glyph_plus_not_colored(self, grid) -> None:
        # Row 2 has a "+" glyph inside the board.
        line = render(grid, color=True).split("\n")[2]
        assert ANSI_RE.sub("", line) == "|     . *+*. o    |"
        assert "*+*" in line


class TestHtml:
    """Tests for HTML output."""

    def test_plain(self, grid) -> None:
        assert render(grid, format="html") == "<pre>" + render(grid) + "</pre>"

    def test_color(self, grid) -> None:
        art = render(grid, format="html", color=True)
        assert '<span style="color:green">S</span>' in art
        assert '<span style="color:red">E</span>' in art
        assert '<span style="color:darkcyan">+-----------------+</span>' in art
        assert "\x1b" not in art

    def test_escapes(self) -> None:
        grid = accumulate([76] + [3] * 11 + [4])
        art = render(grid, format="html")
        assert "&amp;" in art
        assert "&" not in art.replace("&amp;", "")


class TestSvg:
    """Tests for SVG output."""

    def test_structure(self, grid) -> None:
        art = render(grid, format="svg")
        assert art.startswith("<svg ")
        assert 'viewBox="0 0 190 180"' in art
        assert 'font-family="monospace"' in art
        assert art.count("<text ") == 11 * 19
        assert 'fill="black"' in art
        assert 'fill="green"' not in art

    def test_positions(self, grid) -> None:
        art = render(grid, format="svg")
        assert '<text x="0" y="15" fill="black">+</text>' in art
        assert '<text x="180" y="165" fill="black">+</text>' in art
        # S sits at row 5, column 9 of the board (1-indexed), inside the frame.
        assert '<text x="90" y="90" fill="black">S</text>' in art

    def test_color(self, grid) -> None:
        art = render(grid, format="svg", color=True)
        assert art.count('fill="green"') == 1
        assert art.count('fill="red"') == 1
        assert art.count('fill="darkcyan"') == 19 * 2 + 9 * 2


class TestOptions:
    """Tests for option validation."""

    def test_defaults(self) -> None:
        assert RenderOptions.create() == RenderOptions(title="", format="text", color=False)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"format": "png"},
            {"format": None},
            {"color": "yes"},
            {"color": 1},
            {"title": 42},
        ],
    )
    def test_invalid(self, grid, kwargs) -> None:
        with pytest.raises(InvalidInputError):
            render(grid, **kwargs)
