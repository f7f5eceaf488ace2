"""
Argument parsing for greeter.

The accepted command line is small enough that it is matched by hand:
argparse would accept `-h` in any position and report its own errors,
while greeter only honours a help flag in first position and reports
fixed error messages.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from .config import Config
from .errors import ArgumentCountError, ParseError

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")

# Optional sign followed by ASCII digits only.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Counts must fit a signed 64-bit integer.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def parse_args(args: Sequence[str]) -> Config:
    """
    Build a Config from the command line, excluding the program name.

    A help flag in first position wins over anything that follows it.
    """

    if args and args[0] in HELP_FLAGS:
        if len(args) > 1:
            logger.debug("ignoring arguments after help flag: %s", list(args[1:]))
        return Config(print_usage=True, num_times=0)

    if len(args) != 1:
        raise ArgumentCountError("invalid number of arguments")

    return Config(print_usage=False, num_times=_parse_int(args[0]))


def _parse_int(token: str) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise ParseError(f'parsing "{token}": invalid syntax')
    value = int(token)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ParseError(f'parsing "{token}": value out of range')
    return value
