"""File artifacts written by ``shipctl init``.

Absent files are treated as empty, never as errors. All writes are UTF-8.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any


def read_text_or_empty(path: Path) -> str:
    """Return the file contents, or ``""`` if the file does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def append_lines(path: Path, lines: Iterable[str]) -> None:
    """Append *lines* to *path*, keeping existing content intact.

    A missing trailing newline on the existing content is added first so the
    new lines never run into the last existing one.
    """
    new = "".join(f"{line}\n" for line in lines)
    if not new:
        return
    current = read_text_or_empty(path)
    if current and not current.endswith("\n"):
        new = "\n" + new
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as fh:
        fh.write(new)


def ensure_line(path: Path, entry: str) -> bool:
    """Make sure *entry* is present as a whole line in *path*.

    Returns True if the file was modified.
    """
    existing = {line.strip() for line in read_text_or_empty(path).splitlines()}
    if entry in existing:
        return False
    append_lines(path, [entry])
    return True


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write *data* as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
