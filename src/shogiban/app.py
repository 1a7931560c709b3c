"""Application entry point."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch the Shogiban document viewer."""
    from shogiban.bootstrap import run_application

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application())


if __name__ == "__main__":
    main()
