from __future__ import annotations

import csv
import os
from pathlib import Path

from loadkit.io.files import is_file_empty


class CsvSink:
    """Append-only CSV writer for response rows.

    A response is a comma-joined string; it is split on "," and written as
    one record. Rows are flushed as they are written so a crashed run keeps
    everything recorded so far.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.is_new = is_file_empty(self.path)
        self._f = self.path.open("a", newline="", encoding="utf-8")
        self._w = csv.writer(self._f)

    def __enter__(self) -> CsvSink:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._f.closed

    def write_header(self, response: str) -> None:
        self._write(response)

    def write_response(self, response: str) -> None:
        self._write(response)

    def write_row(self, row: list) -> None:
        self._w.writerow(row)
        self._f.flush()

    def _write(self, response: str) -> None:
        self.write_row(response.split(","))

    def close(self) -> None:
        if not self._f.closed:
            self._f.close()
