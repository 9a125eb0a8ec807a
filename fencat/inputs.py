"""Reading raw FEN text from a file or a stream."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

log = logging.getLogger(__name__)


def read_source(path: Optional[str | Path] = None, stdin: Optional[TextIO] = None) -> str:
    """Return the full text of *path*, or of *stdin* when no path is given.

    ``"-"`` is treated as standard input.  ``OSError`` from opening or
    reading the file is left to the caller.
    """
    if path is None or str(path) == "-":
        stream = stdin if stdin is not None else sys.stdin
        log.debug("Reading FEN from stdin")
        return stream.read()

    log.debug("Reading FEN from %s", path)
    return Path(path).read_text(encoding="utf-8")
