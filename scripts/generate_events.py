"""Script entry point for regenerating the event pages."""
from __future__ import annotations

import sys

from eventpages.cli import main as cli_main


def main() -> None:
    cli_main(["build", *sys.argv[1:]])


if __name__ == "__main__":
    main()
