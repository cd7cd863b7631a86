from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _read_retained(path: Path, start: int, end: int) -> tuple[list[str], int]:
    kept: list[str] = []
    removed = 0
    # newline="\n": split on LF only, CRLF is handled by _strip_terminator.
    with path.open("r", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
        for lineno, line in enumerate(f, start=1):
            if lineno < start or lineno > end:
                kept.append(_strip_terminator(line))
            else:
                removed += 1
    return kept, removed


def _write_lines(f, lines: list[str]) -> None:
    for line in lines:
        f.write(line + "\n")


def remove_line_range(path: str | os.PathLike[str], start: int, end: int, *, atomic: bool = True) -> int:
    """Remove lines start..end (1-indexed, inclusive) from a text file.

    The whole file is read into memory before anything is written, so a
    read failure leaves it untouched. `start > end` selects nothing and the
    file is rewritten as-is. Every kept line is written back with a "\\n"
    terminator.

    With `atomic=True` the new content goes to a temp file in the same
    directory and replaces `path` via os.replace. With `atomic=False` the
    file is truncated and rewritten in place; if that write fails the file
    is left partially written.

    Bytes that are not valid UTF-8 are carried through unchanged. A
    symlinked `path` is resolved first so the target file is edited.

    Returns the number of removed lines.
    """
    # Edit the link target, not the link.
    p = Path(path).resolve()
    kept, removed = _read_retained(p, int(start), int(end))

    if not atomic:
        with p.open("w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            _write_lines(f, kept)
        return removed

    fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=p.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            _write_lines(f, kept)
            f.flush()
            os.fsync(f.fileno())
        shutil.copymode(p, tmp_name)
        os.replace(tmp_name, p)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return removed
