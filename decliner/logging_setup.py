from __future__ import annotations

import logging
import sys


def configure_logging(log_level: str) -> None:
    # stdout carries the declined forms, so diagnostics go to stderr.
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
