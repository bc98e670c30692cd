"""Logging configuration for the order form.

Everything goes to stderr so it never mixes with the summary printed on
stdout.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    # Babel is chatty at DEBUG when loading locale data
    logging.getLogger("babel").setLevel(logging.WARNING)
