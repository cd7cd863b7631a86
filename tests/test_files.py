from __future__ import annotations

import pytest

from loadkit.io.files import (
    append_string,
    clear_file,
    delete_file,
    is_file_empty,
    rename_file,
    write_bytes,
    write_string,
)


def test_is_file_empty(tmp_path):
    p = tmp_path / "x.txt"
    assert is_file_empty(p) is True  # missing counts as empty
    p.write_text("", encoding="utf-8")
    assert is_file_empty(p) is True
    p.write_text("a", encoding="utf-8")
    assert is_file_empty(p) is False


def test_write_and_append_string(tmp_path):
    p = tmp_path / "log.txt"
    append_string(p, "a\n")
    append_string(p, "b\n")
    assert p.read_text(encoding="utf-8") == "a\nb\n"

    write_string(p, "c\n")
    assert p.read_text(encoding="utf-8") == "c\n"


def test_write_bytes_and_clear(tmp_path):
    p = tmp_path / "blob.bin"
    write_bytes(p, b"\x00\x01\x02")
    assert p.read_bytes() == b"\x00\x01\x02"

    clear_file(p)
    assert p.exists()
    assert p.read_bytes() == b""


def test_clear_missing_file_raises(tmp_path):
    p = tmp_path / "missing.txt"
    with pytest.raises(FileNotFoundError):
        clear_file(p)
    assert not p.exists()


def test_rename_and_delete(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    write_string(a, "hello")

    rename_file(a, b)
    assert not a.exists()
    assert b.read_text(encoding="utf-8") == "hello"

    delete_file(b)
    assert not b.exists()
    with pytest.raises(FileNotFoundError):
        delete_file(b)
