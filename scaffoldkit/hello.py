"""Minimal greeting command."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

GREETING = "Hello, World!"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hello", description="Print a greeting.")
    parser.parse_args(argv)
    sys.stdout.write(GREETING + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())