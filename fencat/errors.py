"""
FEN parse errors.

Every error derives from ``FENError`` (itself a ``ValueError``) so callers
can catch the whole family at the CLI boundary while tests can assert on
the exact kind.  Rank indices are 0-based in input order (0 = first
``/``-separated substring, i.e. chess rank 8).
"""

from __future__ import annotations

from typing import Optional


class FENError(ValueError):
    """Base class for all board-field parse failures."""

    kind: str = "FENError"

    def __init__(self, message: str, rank: Optional[int] = None) -> None:
        super().__init__(message)
        self.rank = rank


class EmptyInput(FENError):
    kind = "EmptyInput"

    def __init__(self) -> None:
        super().__init__("No FEN string provided or input is empty")


class MalformedRankCount(FENError):
    kind = "MalformedRankCount"

    def __init__(self, count: int) -> None:
        super().__init__(f"Expected 8 ranks separated by '/', got {count}")
        self.count = count


class InvalidCharacter(FENError):
    kind = "InvalidCharacter"

    def __init__(self, rank: int, char: str, position: int) -> None:
        super().__init__(
            f"Invalid character {char!r} at position {position} of rank index {rank}",
            rank=rank,
        )
        self.char = char
        self.position = position


class RankOverflow(FENError):
    kind = "RankOverflow"

    def __init__(self, rank: int, files: int) -> None:
        super().__init__(
            f"Rank index {rank} overflows: {files} squares (expected 8)",
            rank=rank,
        )
        self.files = files


class RankUnderflow(FENError):
    kind = "RankUnderflow"

    def __init__(self, rank: int, files: int) -> None:
        super().__init__(
            f"Rank index {rank} is incomplete: {files} squares (expected 8)",
            rank=rank,
        )
        self.files = files
