#!/usr/bin/env python3
"""Main entry point for the argsfile tool."""

import sys

from argsfile.commands import main


def run() -> None:
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
