"""
FEN Board Parsing
=================

Responsibilities:
  1. Extract the board field (first whitespace-delimited token) from raw
     FEN text.  Remaining fields (side to move, castling, …) are ignored.
  2. Decode the board field into an immutable 8×8 ``Board``.
  3. Re-encode a ``Board`` back into a board field.

Decoding rules, per ``/``-separated rank substring:
  • ``1``–``8`` skip that many empty squares.
  • ``PNBRQKpnbrqk`` place a piece and advance one file.
  • Anything else is an ``InvalidCharacter``; every rank is checked for
    these before any file counting starts.
  • The running file count may never pass 8 (``RankOverflow``) and must
    end on exactly 8 (``RankUnderflow``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from fencat.errors import (
    EmptyInput,
    InvalidCharacter,
    MalformedRankCount,
    RankOverflow,
    RankUnderflow,
)
from fencat.models.piece import Piece, piece_from_fen_char

log = logging.getLogger(__name__)

BOARD_SIZE = 8

Rank = Tuple[Optional[Piece], ...]


# ── Data structures ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Board:
    """8×8 grid of optional pieces.

    ``ranks[0]`` is the first rank-row of the FEN string (chess rank 8),
    ``ranks[r][0]`` is the a-file.
    """
    ranks: Tuple[Rank, ...]

    def __post_init__(self) -> None:
        if len(self.ranks) != BOARD_SIZE or any(
            len(rank) != BOARD_SIZE for rank in self.ranks
        ):
            raise ValueError("Board must be exactly 8×8")

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    def piece_at(self, rank: int, file: int) -> Optional[Piece]:
        return self.ranks[rank][file]

    def pieces(self) -> Iterator[Tuple[int, int, Piece]]:
        """Yield ``(rank, file, piece)`` for every occupied square."""
        for r, rank in enumerate(self.ranks):
            for f, piece in enumerate(rank):
                if piece is not None:
                    yield r, f, piece

    def to_fen(self) -> str:
        return board_to_fen(self)


# ── Parsing ────────────────────────────────────────────────────────────

def extract_board_field(text: str) -> str:
    """Return the first whitespace-delimited token of *text*.

    Raises ``EmptyInput`` when *text* holds nothing but whitespace.
    """
    fields = text.split()
    if not fields:
        raise EmptyInput()
    return fields[0]


def _check_characters(rows: List[str]) -> None:
    for rank_idx, rank_str in enumerate(rows):
        for pos, ch in enumerate(rank_str):
            if ch not in "12345678" and piece_from_fen_char(ch) is None:
                raise InvalidCharacter(rank_idx, ch, pos)


def _parse_rank(rank_idx: int, rank_str: str) -> Rank:
    """Count files across *rank_str*; its characters are already checked."""
    squares: List[Optional[Piece]] = []

    for ch in rank_str:
        if ch in "12345678":
            run = int(ch)
            if len(squares) + run > BOARD_SIZE:
                raise RankOverflow(rank_idx, len(squares) + run)
            squares.extend([None] * run)
            continue

        if len(squares) + 1 > BOARD_SIZE:
            raise RankOverflow(rank_idx, len(squares) + 1)
        squares.append(piece_from_fen_char(ch))

    if len(squares) != BOARD_SIZE:
        raise RankUnderflow(rank_idx, len(squares))

    return tuple(squares)


def parse_board(field: str) -> Board:
    """Decode a FEN board field into a ``Board``.

    Parameters
    ----------
    field : str
        The board field only, e.g.
        ``rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR``.

    Returns
    -------
    Board

    Raises
    ------
    EmptyInput, MalformedRankCount, InvalidCharacter, RankOverflow, RankUnderflow
    """
    if not field:
        raise EmptyInput()

    rows = field.split("/")
    if len(rows) != BOARD_SIZE:
        raise MalformedRankCount(len(rows))

    # Characters first, in every rank, then file counts
    _check_characters(rows)

    board = Board(tuple(_parse_rank(i, row) for i, row in enumerate(rows)))
    log.debug("Parsed board field %s", field)
    return board


def parse_fen(text: str) -> Board:
    """Parse the board field of a (possibly full) FEN string."""
    return parse_board(extract_board_field(text))


# ── Encoding ───────────────────────────────────────────────────────────

def board_to_fen(board: Board) -> str:
    """Run-length encode *board* into a FEN board field."""
    rows: List[str] = []
    for rank in board.ranks:
        row_chars: List[str] = []
        empty_count = 0

        for piece in rank:
            if piece is None:
                empty_count += 1
            else:
                if empty_count > 0:
                    row_chars.append(str(empty_count))
                    empty_count = 0
                row_chars.append(piece.fen_char)

        if empty_count > 0:
            row_chars.append(str(empty_count))

        rows.append("".join(row_chars))

    return "/".join(rows)
