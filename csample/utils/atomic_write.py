"""Atomic write helpers.

Write files atomically by writing to a temporary file in the same directory
and then moving it into place with os.replace. A run that fails half way
never leaves a truncated sample behind.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8", errors: str = "strict") -> None:
    _ensure_parent(path)
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), text=True)
    try:
        with os.fdopen(fd, "w", encoding=encoding, errors=errors, newline="") as fh:
            fh.write(text)
        os.replace(tmp, str(path))
    finally:
        if os.path.exists(tmp):
            try:
                os.remove(tmp)
            except OSError:
                pass


def atomic_write_lines(path: Path, lines: Iterable[str], encoding: str = "utf-8", errors: str = "strict") -> None:
    """Write ``lines`` (without terminators) one per line, atomically."""
    text = "".join(f"{line}\n" for line in lines)
    atomic_write_text(path, text, encoding=encoding, errors=errors)
