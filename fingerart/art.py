import logging
from dataclasses import dataclass
from typing import Optional

from .board import BinaryInput, InvalidInputError, parse_input
from .grid import accumulate
from .render import RenderOptions, render
from .walk import trace

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    ok: bool
    value: Optional[str] = None
    error: Optional[InvalidInputError] = None


def generate(data: BinaryInput, title: str = "", format: str = "text", color: bool = False) -> str:
    """
    Produce fingerprint random art.

    `data` is either an SSH fingerprint string ("fc:94:...:b7", 16 hex
    pairs) or any byte sequence; other strings are taken as their UTF-8
    bytes. Raises InvalidInputError for any other input type or for bad
    options.
    """
    options = RenderOptions.create(title=title, format=format, color=color)
    raw = parse_input(data)
    grid = accumulate(trace(raw))
    return render(grid, format=options.format, title=options.title, color=options.color)


def try_generate(data: BinaryInput, title: str = "", format: str = "text", color: bool = False) -> Result:
    """Like generate, but reports invalid input in the result instead of raising."""
    try:
        return Result(ok=True, value=generate(data, title=title, format=format, color=color))
    except InvalidInputError as e:
        LOG.debug("invalid input: %s", e)
        return Result(ok=False, error=e)
