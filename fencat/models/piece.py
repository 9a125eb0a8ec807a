"""
Chess Pieces – Colour, Kind and FEN Letter Mapping
==================================================

A piece is a closed (colour, kind) pair.  FEN encodes it as one letter:
the letter picks the kind (``P N B R Q K``) and its case picks the colour
(uppercase = white, lowercase = black).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    WHITE = "white"
    BLACK = "black"


class Kind(Enum):
    """Piece kind; the value is the lowercase FEN letter."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"


@dataclass(frozen=True)
class Piece:
    """A single chess piece."""
    color: Color
    kind: Kind

    @classmethod
    def from_fen_char(cls, char: str) -> "Piece":
        piece = piece_from_fen_char(char)
        if piece is None:
            raise ValueError(f"Not a FEN piece letter: {char!r}")
        return piece

    @property
    def fen_char(self) -> str:
        letter = self.kind.value
        return letter.upper() if self.color is Color.WHITE else letter

    def __str__(self) -> str:
        return self.fen_char


def piece_from_fen_char(char: str) -> Optional[Piece]:
    """Map a FEN letter to its piece, or ``None`` for any other character."""
    if len(char) != 1 or not char.isascii() or not char.isalpha():
        return None
    try:
        kind = Kind(char.lower())
    except ValueError:
        return None
    color = Color.WHITE if char.isupper() else Color.BLACK
    return Piece(color, kind)

