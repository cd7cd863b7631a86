from __future__ import annotations

import argparse
import csv
import json
from dataclasses import asdict, fields
from pathlib import Path

from loadkit.io.csv_sink import CsvSink
from loadkit.utils.metrics import LatencySummary, summarize_latencies


def _load_column(path: Path, column: str) -> list[float]:
    out: list[float] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or column not in reader.fieldnames:
            raise SystemExit(f"column {column!r} not found in: {path}")
        # Line 1 is the header.
        for lineno, r in enumerate(reader, start=2):
            raw = (r.get(column) or "").strip()
            if not raw:
                continue
            try:
                out.append(float(raw))
            except ValueError:
                raise SystemExit(f"{path}:{lineno}: not a number in {column!r}: {raw!r}") from None
    return out


def _append_summary(out_path: Path, source: Path, column: str, summary: LatencySummary) -> None:
    names = [f.name for f in fields(LatencySummary)]
    with CsvSink(out_path) as sink:
        if sink.is_new:
            sink.write_row(["source", "column", *names])
        sink.write_row([str(source), column, *(getattr(summary, n) for n in names)])


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Latency report (p50/p90/p95/p99, mean, stddev) for a response CSV")
    ap.add_argument("--csv", type=str, required=True, help="response CSV with a header row")
    ap.add_argument("--column", type=str, default="duration_ms", help="latency column (ms)")
    ap.add_argument("--out", type=str, default=None, help="append the summary as a row to this CSV")
    ap.add_argument("--json", action="store_true", help="print the summary as JSON")
    args = ap.parse_args(argv)

    csv_path = Path(args.csv)
    if not csv_path.exists():
        raise SystemExit(f"csv not found: {csv_path}")

    samples = _load_column(csv_path, str(args.column))
    summary = summarize_latencies(samples)

    if args.json:
        print(json.dumps(asdict(summary), ensure_ascii=False))
    else:
        print("Latency:", summary)

    if args.out:
        out_path = Path(args.out)
        _append_summary(out_path, csv_path, str(args.column), summary)
        print("Wrote:", out_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
