"""Console entrypoint for pixelturtle.

This module delegates to :mod:`pixelturtle.cli` so that running
``python -m pixelturtle`` or the installed ``pixelturtle`` console script
executes the same code.
"""

from __future__ import annotations

import sys

from pixelturtle.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`pixelturtle.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
