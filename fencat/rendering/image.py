"""
Board Image Rendering
=====================

Draws a ``Board`` onto a BGR image with OpenCV, using the same traversal
and shading rules as the terminal renderer.  Pieces are drawn as their
FEN letters: white pieces in white with a dark outline, black pieces in
black.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import cv2
import numpy as np

from fencat.models.piece import Color
from fencat.parsing.fen import BOARD_SIZE, Board
from fencat.rendering.schemes import DEFAULT_SCHEME, ColorScheme
from fencat.rendering.terminal import FILE_LABELS, display_squares, is_light_square

log = logging.getLogger(__name__)

MARGIN_RATIO = 0.5                     # coordinate margin, in squares
MARGIN_COLOR = (40, 40, 40)            # BGR
LABEL_COLOR = (220, 220, 220)          # BGR


def _bgr(rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
    r, g, b = rgb
    return b, g, r


def _put_centered(
    img: np.ndarray,
    text: str,
    center: Tuple[int, int],
    scale: float,
    color: Tuple[int, int, int],
    thickness: int,
) -> None:
    (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
    origin = (center[0] - tw // 2, center[1] + th // 2)
    cv2.putText(
        img, text, origin,
        cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA,
    )


def render_image(
    board: Board,
    flip: bool = False,
    square_size: int = 64,
    scheme: ColorScheme = DEFAULT_SCHEME,
    coordinates: bool = True,
) -> np.ndarray:
    """Render *board* as a BGR image.

    Parameters
    ----------
    board : Board
        Parsed position.
    flip : bool
        Rotate the board by 180° (black's perspective).
    square_size : int
        Edge length of one square in pixels.
    scheme : ColorScheme
        Light / dark square colours.
    coordinates : bool
        Draw file letters and rank numbers in a margin around the board.

    Returns
    -------
    np.ndarray
        ``uint8`` array of shape ``(side, side, 3)``.
    """
    if square_size < 8:
        raise ValueError(f"square_size must be at least 8, got {square_size}")

    margin = int(square_size * MARGIN_RATIO) if coordinates else 0
    side = BOARD_SIZE * square_size + 2 * margin
    img = np.full((side, side, 3), MARGIN_COLOR, dtype=np.uint8)

    light, dark = _bgr(scheme.light_rgb), _bgr(scheme.dark_rgb)
    piece_scale = square_size / 40.0
    piece_thickness = max(1, square_size // 24)

    for row, squares in enumerate(display_squares(flip)):
        for col, (rank, file) in enumerate(squares):
            x = margin + col * square_size
            y = margin + row * square_size
            bg = light if is_light_square(rank, file) else dark
            cv2.rectangle(
                img, (x, y), (x + square_size - 1, y + square_size - 1), bg, -1,
            )

            piece = board.piece_at(rank, file)
            if piece is None:
                continue
            center = (x + square_size // 2, y + square_size // 2)
            if piece.color is Color.WHITE:
                _put_centered(img, piece.fen_char, center, piece_scale,
                              (0, 0, 0), piece_thickness + 2)
                _put_centered(img, piece.fen_char, center, piece_scale,
                              (255, 255, 255), piece_thickness)
            else:
                _put_centered(img, piece.fen_char, center, piece_scale,
                              (0, 0, 0), piece_thickness)

    if coordinates:
        files = FILE_LABELS[::-1] if flip else FILE_LABELS
        label_scale = square_size / 128.0
        for i in range(BOARD_SIZE):
            offset = margin + i * square_size + square_size // 2
            rank_number = str(i + 1 if flip else BOARD_SIZE - i)
            for edge in (margin // 2, side - margin // 2):
                _put_centered(img, files[i], (offset, edge), label_scale, LABEL_COLOR, 1)
                _put_centered(img, rank_number, (edge, offset), label_scale, LABEL_COLOR, 1)

    return img


def save_image(image: np.ndarray, path: str | Path) -> None:
    """Write *image* to *path*; the format follows the file extension."""
    path = Path(path)
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as exc:
        raise OSError(f"Could not write image: {path} ({exc})") from exc
    if not ok:
        raise OSError(f"Could not write image: {path}")
    log.info("Saved board image to %s", path)
