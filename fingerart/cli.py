import argparse
import logging
import sys
from typing import List, Optional

from .board import parse_input
from .grid import accumulate
from .image import render_image
from .render import FORMATS, RenderOptions, render
from .walk import trace

LOG = logging.getLogger("fingerart")


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    LOG.setLevel(level)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    LOG.handlers[:] = [sh]
    LOG.propagate = False


# ----------------------------
# CLI
# ----------------------------

def run_cli(args: argparse.Namespace) -> int:
    if args.file:
        with open(args.file, "rb") as f:
            data = f.read()
    else:
        data = args.input

    options = RenderOptions.create(title=args.title, format=args.format, color=args.color)
    grid = accumulate(trace(parse_input(data)))
    art = render(grid, format=options.format, title=options.title, color=options.color)

    if args.png:
        img = render_image(grid, scale=args.scale, color=options.color)
        img.save(args.png)
        LOG.info("saved %s", args.png)

    sys.stdout.write(art)
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fingerart",
        description="OpenSSH-style fingerprint random art (Drunken Bishop).",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", "-i", help="SSH fingerprint (aa:bb:...) or arbitrary text")
    src.add_argument("--file", "-f", help="Read raw input bytes from file")
    p.add_argument("--title", "-t", default="", help="Title embedded in the top border (max 15 chars)")
    p.add_argument("--format", default="text", choices=FORMATS, help="Output format (default: text)")
    p.add_argument("--color", action="store_true", help="Colorize start, end and border")
    p.add_argument("--png", help="Also save a PNG rendering to this path")
    p.add_argument("--scale", type=int, default=16, help="Pixels per cell for --png (default: 16)")
    p.add_argument("--debug", action="store_true", help="Debug logging to stderr")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        return run_cli(args)
    except (ValueError, OSError) as e:
        LOG.debug("failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
