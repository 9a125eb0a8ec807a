"""
fencat – Main Entry Point
=========================

Reads a FEN string and prints the board.

Usage examples
--------------

**From stdin**::

    echo rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR | python fencat.py

**From a file, black's perspective**::

    python fencat.py --flip fen.txt

**Inline, saved as an image too**::

    python fencat.py --fen "8/3k4/8/3K4/8/8/8/8 w - - 0 1" \\
        --save-image board.png

Only the board field (the first whitespace-delimited token) is used; any
further FEN fields are ignored.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from fencat import __version__
from fencat.errors import EmptyInput, FENError
from fencat.inputs import read_source
from fencat.parsing.fen import parse_fen
from fencat.rendering.schemes import SCHEMES, get_scheme
from fencat.rendering.terminal import render_board

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("fencat")

EXIT_FAILURE = 1


# ═══════════════════════════════════════════════════════════════════════
# CLI
# ═══════════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fencat",
        description="Read a FEN string from a file or stdin and print the chessboard.",
    )
    parser.add_argument("file", nargs="?", default=None, metavar="FILE",
                        help="File holding the FEN string (default: stdin)")
    parser.add_argument("--fen", default=None,
                        help="FEN string given inline instead of FILE / stdin")
    parser.add_argument("-f", "--flip", action="store_true",
                        help="Show the board from black's side")
    parser.add_argument("--color", default="auto", choices=["auto", "always", "never"],
                        help="ANSI colours: auto (default, only on a terminal), always, never")
    parser.add_argument("--scheme", default="grey", choices=sorted(SCHEMES),
                        help="Square colour scheme")
    parser.add_argument("--no-coordinates", action="store_true",
                        help="Hide rank numbers and file letters")
    parser.add_argument("--save-image", default=None, metavar="PATH",
                        help="Also render the board to an image file")
    parser.add_argument("--square-size", type=int, default=64,
                        help="Square size in pixels for --save-image")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def _use_color(mode: str) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return sys.stdout.isatty()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log.setLevel(logging.DEBUG)
        logging.getLogger().setLevel(logging.DEBUG)

    # Read
    try:
        text = args.fen if args.fen is not None else read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Could not read FEN input: %s", exc)
        sys.exit(EXIT_FAILURE)

    # Parse
    try:
        board = parse_fen(text)
    except FENError as exc:
        log.error("%s: %s", exc.kind, exc)
        if isinstance(exc, EmptyInput):
            parser.print_usage(sys.stderr)
        sys.exit(EXIT_FAILURE)
    log.debug("Normalised board field: %s", board.to_fen())

    scheme = get_scheme(args.scheme)

    # Image before text: a failed write must leave stdout empty
    if args.save_image:
        from fencat.rendering.image import render_image, save_image

        try:
            image = render_image(
                board,
                flip=args.flip,
                square_size=args.square_size,
                scheme=scheme,
                coordinates=not args.no_coordinates,
            )
            save_image(image, args.save_image)
        except (OSError, ValueError) as exc:
            log.error("%s", exc)
            sys.exit(EXIT_FAILURE)

    lines = render_board(
        board,
        flip=args.flip,
        color=_use_color(args.color),
        coordinates=not args.no_coordinates,
        scheme=scheme,
    )
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
