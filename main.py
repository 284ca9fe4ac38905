"""CLI entrypoint for the letter puzzle generator."""

from __future__ import annotations

import sys

from letterpuzzle.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
