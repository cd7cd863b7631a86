from __future__ import annotations

import argparse
from pathlib import Path

from loadkit.io.lines import remove_line_range


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Remove lines START..END (1-indexed, inclusive) from a text file")
    ap.add_argument("path", type=str)
    ap.add_argument("start", type=int)
    ap.add_argument("end", type=int)
    ap.add_argument(
        "--in-place",
        action="store_true",
        help="truncate and rewrite the file directly instead of temp file + rename",
    )
    args = ap.parse_args(argv)

    path = Path(args.path)
    if args.start < 1:
        raise SystemExit("START must be >= 1")
    if not path.is_file():
        raise SystemExit(f"file not found: {path}")

    removed = remove_line_range(path, args.start, args.end, atomic=not args.in_place)
    print(f"Removed {removed} line(s) from:", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
