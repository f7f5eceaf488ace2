"""
Command-line interface for greeter.

This module wires the standard streams into the parse, validate and run
stages and maps their errors onto exit statuses.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from .errors import GreeterError, MissingInputError
from .logging_utils import configure_logging
from .parser import parse_args
from .runner import print_usage, run_cmd
from .validator import validate_args


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    try:
        config = parse_args(argv)
        validate_args(config)
        run_cmd(sys.stdin, sys.stdout, config)
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except MissingInputError as exc:
        print(f"greeter: error: {exc}", file=sys.stderr)
        return 1
    except GreeterError as exc:
        # A bad invocation, so show how to call the program.
        print(f"greeter: error: {exc}", file=sys.stderr)
        print_usage(sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
