"""
Checks run on a parsed Config before anything is executed.
"""

from __future__ import annotations

from .config import Config
from .errors import ValidationError


def validate_args(config: Config) -> None:
    """Raise ValidationError unless the config can be run."""

    if config.print_usage:
        return

    if config.num_times <= 0:
        raise ValidationError("must specify a number greater than 0")
