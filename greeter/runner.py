"""
Execution of a validated greeter Config.

Input and output streams are passed in explicitly, so tests can drive
the runner with io.StringIO instead of the real standard streams.
"""

from __future__ import annotations

import logging
from typing import TextIO

from .config import Config
from .errors import MissingInputError

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: greeter <integer> : print a greeting that many times.\n"
    "-h : print this help message.\n"
)

PROMPT = "Your name please? Press the return key when done.\n"


def print_usage(writer: TextIO) -> None:
    writer.write(USAGE)


def get_name(reader: TextIO, writer: TextIO) -> str:
    """
    Prompt for a name and read a single line from reader.

    A single trailing line ending (LF or CRLF) is removed; end of stream
    counts as the end of the line. Raises MissingInputError if the line is empty.
    """

    writer.write(PROMPT)
    name = reader.readline()
    if name.endswith("\n"):
        name = name[:-1]
    if name.endswith("\r"):
        name = name[:-1]
    if not name:
        raise MissingInputError("you didn't enter your name")
    return name


def greet_user(name: str, writer: TextIO, num_times: int) -> None:
    msg = f"Nice to meet you {name}\n"
    for _ in range(num_times):
        writer.write(msg)


def run_cmd(reader: TextIO, writer: TextIO, config: Config) -> None:
    """
    Print usage, or prompt once for a name and greet it num_times times.

    Nothing is read from reader when usage is requested.
    """

    if config.print_usage:
        print_usage(writer)
        return

    name = get_name(reader, writer)
    logger.info("greeting %r %d time(s)", name, config.num_times)
    greet_user(name, writer, config.num_times)
