"""
Terminal Board Rendering
========================

Turns a ``Board`` into printable lines, one line per rank, eight
three-column cells per line.

Orientation is an index transform applied while traversing the board:
flipping visits ranks 7→0 and files 7→0 (a 180° rotation) and never
touches the ``Board`` itself.  Square shading is taken from the board
coordinates, ``(rank + file) % 2``, so a flipped board keeps every
square its true colour.

Two cell styles:
  • colour – ANSI 256-colour background per square, piece glyph drawn in
    a white or black foreground.
  • plain  – FEN letters, ``.`` / ``:`` for empty light / dark squares.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from fencat.models.piece import Color, Kind, Piece
from fencat.parsing.fen import BOARD_SIZE, Board
from fencat.rendering.schemes import DEFAULT_SCHEME, ColorScheme

Square = Tuple[int, int]

# ── ANSI escape codes ──────────────────────────────────────────────────

RESET_COLOR = "\x1b[0m"

FOREGROUND: dict[Color, str] = {
    Color.WHITE: "\x1b[38;5;231m",
    Color.BLACK: "\x1b[38;5;0m",
}

# Solid glyphs for both sides; the foreground colour tells them apart.
# U+FE0E keeps the pawn from being drawn as an emoji.
GLYPHS: dict[Kind, str] = {
    Kind.PAWN: "♟︎",
    Kind.KNIGHT: "♞",
    Kind.BISHOP: "♝",
    Kind.ROOK: "♜",
    Kind.QUEEN: "♛",
    Kind.KING: "♚",
}

PLAIN_EMPTY_LIGHT = " . "
PLAIN_EMPTY_DARK = " : "

FILE_LABELS = "abcdefgh"


# ── Orientation ────────────────────────────────────────────────────────

def flip_square(rank: int, file: int) -> Square:
    """Rotate a square by 180°."""
    return BOARD_SIZE - 1 - rank, BOARD_SIZE - 1 - file


def display_squares(flip: bool = False) -> List[List[Square]]:
    """Board coordinates in display order, one list per output row."""
    rows: List[List[Square]] = []
    for row in range(BOARD_SIZE):
        squares = [(row, col) for col in range(BOARD_SIZE)]
        if flip:
            squares = [flip_square(r, f) for r, f in squares]
        rows.append(squares)
    return rows


def is_light_square(rank: int, file: int) -> bool:
    return (rank + file) % 2 == 0


# ── Cells ──────────────────────────────────────────────────────────────

def render_cell(
    piece: Optional[Piece],
    is_light: bool,
    color: bool = True,
    scheme: ColorScheme = DEFAULT_SCHEME,
) -> str:
    if not color:
        if piece is None:
            return PLAIN_EMPTY_LIGHT if is_light else PLAIN_EMPTY_DARK
        return f" {piece.fen_char} "

    cell = scheme.background(is_light)
    if piece is None:
        cell += "   "
    else:
        cell += f"{FOREGROUND[piece.color]} {GLYPHS[piece.kind]} "
    # Reset per cell; the newline after a row must stay uncoloured
    return cell + RESET_COLOR


# ── Board ──────────────────────────────────────────────────────────────

def render_rows(
    board: Board,
    flip: bool = False,
    color: bool = True,
    scheme: ColorScheme = DEFAULT_SCHEME,
) -> List[str]:
    """Render the 8 ranks of *board* as 8 lines of 8 cells each."""
    lines: List[str] = []
    for squares in display_squares(flip):
        lines.append("".join(
            render_cell(board.piece_at(r, f), is_light_square(r, f), color, scheme)
            for r, f in squares
        ))
    return lines


def render_board(
    board: Board,
    flip: bool = False,
    color: bool = True,
    coordinates: bool = True,
    scheme: ColorScheme = DEFAULT_SCHEME,
) -> List[str]:
    """Render *board*, optionally framed with rank numbers and file letters.

    Parameters
    ----------
    board : Board
        Parsed position.
    flip : bool
        Show the board from black's side (180° rotation).
    color : bool
        Emit ANSI colour codes; otherwise plain ASCII letters.
    coordinates : bool
        Add a file-letter header and footer and rank numbers on both
        sides of every row.
    scheme : ColorScheme
        Light / dark square colours used when *color* is enabled.

    Returns
    -------
    list[str]
        Lines without trailing newlines.
    """
    rows = render_rows(board, flip=flip, color=color, scheme=scheme)
    if not coordinates:
        return rows

    files = FILE_LABELS[::-1] if flip else FILE_LABELS
    header = "  " + "".join(f" {letter} " for letter in files)

    framed = [header]
    for squares, row in zip(display_squares(flip), rows):
        number = BOARD_SIZE - squares[0][0]
        framed.append(f"{number} {row} {number}")
    framed.append(header)
    return framed
