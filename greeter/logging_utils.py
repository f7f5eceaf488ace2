"""
Logging helpers for greeter.

Standard output carries the greeting, so log records always go to
stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """Send log records at or above level to stream (stderr by default)."""

    logging.basicConfig(
        level=level,
        stream=sys.stderr if stream is None else stream,
        format="%(levelname)s %(name)s: %(message)s",
    )
