"""
Configuration model for greeter.

The parser builds a Config once per invocation and passes it down to
the validator and runner, so nothing depends on global state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """
    Options for a single greeter run.

    num_times is ignored when print_usage is set.
    """

    print_usage: bool = False
    num_times: int = 0
