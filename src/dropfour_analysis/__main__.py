from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # "analyze" is the only subcommand; flags alone mean analyze too
    if argv and argv[0].lower() in {"analyze", "analysis"}:
        argv = argv[1:]
    elif argv and not argv[0].startswith("-"):
        print("Usage:")
        print("  python -m dropfour_analysis [analyze] [--csv ...] [--metric ...] [--figures-dir figures]")
        return 2

    return analyze_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
