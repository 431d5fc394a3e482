from __future__ import annotations

import sys

from .cli.analyze_csv import main as analyze_main

USAGE = "usage: python -m jump61_analysis [analyze] [--csv PATH] [--metric COL] [--no-plots]"


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    # "analyze" is the only command and may be left out
    if args and args[0].lower() in {"analyze", "analysis"}:
        args = args[1:]
    if args and not args[0].startswith("-"):
        print(USAGE)
        return 2
    return analyze_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
