"""
fencat – FEN Board Viewer
=========================

Reads a chess position in Forsyth–Edwards Notation and prints the board
as a shaded grid in the terminal.

Architecture:
    1. Input          – inline argument, file or stdin → board field
    2. Parsing        – board field → immutable 8×8 ``Board``
    3. Rendering      – ``Board`` + flip flag → terminal lines (or an image)
"""

__version__ = "1.0.0"
