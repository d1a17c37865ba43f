#!/usr/bin/env python3
# termcore/__main__.py
from __future__ import annotations

import sys

from termcore.boot import boot_sequence


def main() -> int:
    try:
        state = boot_sequence()
    except Exception:
        # the failing step has already been reported
        return 1
    with state.cli as cli:
        cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
