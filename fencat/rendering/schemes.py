"""
Board colour schemes.

Each scheme pairs ANSI 256-colour background codes (terminal output) with
RGB tuples (image output) for the light and dark squares.  ``grey`` keeps
the classic fencat colours, chosen so both white and black pieces stay
readable on either square.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ColorScheme:
    name: str
    light_ansi: int                      # 256-colour palette index
    dark_ansi: int
    light_rgb: Tuple[int, int, int]
    dark_rgb: Tuple[int, int, int]

    def background(self, is_light: bool) -> str:
        code = self.light_ansi if is_light else self.dark_ansi
        return f"\x1b[48;5;{code}m"


SCHEMES: Dict[str, ColorScheme] = {
    "grey": ColorScheme("grey", 249, 246, (178, 178, 178), (148, 148, 148)),
    "brown": ColorScheme("brown", 223, 137, (240, 217, 181), (181, 136, 99)),
    "green": ColorScheme("green", 187, 107, (235, 236, 208), (119, 149, 86)),
    "blue": ColorScheme("blue", 152, 67, (222, 227, 230), (140, 162, 173)),
}

DEFAULT_SCHEME = SCHEMES["grey"]


def get_scheme(name: str) -> ColorScheme:
    try:
        return SCHEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown colour scheme {name!r}; choose from {sorted(SCHEMES)}"
        ) from None
