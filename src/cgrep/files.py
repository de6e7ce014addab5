"""Reading and replacing source files.

Sources are read as text with ``surrogateescape`` and no newline
translation, so bytes that are not UTF-8 and ``\\r\\n`` line endings survive
a rewrite unchanged.

"""

from __future__ import annotations

import io
import os
import sys
import tempfile
from collections.abc import Iterable, Iterator
from functools import partial
from typing import TextIO

from cgrep.errors import SourceError

ENCODING = "utf-8"
ERRORS = "surrogateescape"
CHUNK_SIZE = 64 * 1024


def open_source(path: str) -> TextIO:
    """Open ``path`` for lexing.

    Raises:
        SourceError: If the file cannot be opened
    """
    try:
        return open(path, encoding=ENCODING, errors=ERRORS, newline="")
    except OSError as exc:
        raise SourceError(path, exc.strerror or str(exc)) from exc


def stdin_source() -> TextIO:
    """Standard input, re-wrapped without newline translation when possible."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding=ENCODING, errors=ERRORS, newline="")


def iter_chunks(stream: TextIO, size: int = CHUNK_SIZE) -> Iterator[str]:
    """Read ``stream`` in chunks until end of file."""
    return iter(partial(stream.read, size), "")


def replace_file(path: str, lines: Iterable[str]) -> None:
    """Atomically replace ``path`` with ``lines``.

    The new text is written to a temporary file in the same directory and
    moved over the original, keeping the original's permission bits.

    Raises:
        SourceError: If the file cannot be written
    """
    directory = os.path.dirname(os.path.abspath(path))
    try:
        mode = os.stat(path).st_mode & 0o7777
        fd, tmp_path = tempfile.mkstemp(prefix=".cse", dir=directory)
    except OSError as exc:
        raise SourceError(path, exc.strerror or str(exc)) from exc
    try:
        with open(fd, "w", encoding=ENCODING, errors=ERRORS, newline="") as out:
            out.writelines(lines)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError as exc:
        os.unlink(tmp_path)
        raise SourceError(path, exc.strerror or str(exc)) from exc
