from __future__ import annotations

import os
from pathlib import Path

StrPath = str | os.PathLike[str]


def is_file_empty(path: StrPath) -> bool:
    """True if `path` does not exist or has zero size."""
    try:
        return Path(path).stat().st_size == 0
    except FileNotFoundError:
        return True


def write_string(path: StrPath, s: str) -> None:
    Path(path).write_text(s, encoding="utf-8")


def append_string(path: StrPath, s: str) -> None:
    with Path(path).open("a", encoding="utf-8") as f:
        f.write(s)


def write_bytes(path: StrPath, b: bytes) -> None:
    Path(path).write_bytes(b)


def clear_file(path: StrPath) -> None:
    # r+ fails on a missing file instead of creating it.
    with Path(path).open("r+b") as f:
        f.truncate(0)


def rename_file(old_path: StrPath, new_path: StrPath) -> None:
    os.rename(old_path, new_path)


def delete_file(path: StrPath) -> None:
    os.remove(path)
