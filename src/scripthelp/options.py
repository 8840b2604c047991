"""
Command line option parsing.

Options have the form --key or --key=value. Each key maps onto a typed field
of CliOptions; keys outside that model are rejected rather than assigned.

Usage:
    options, args = parse_cli_options(["extract", "--prefix=cmd_", "x.sh"])
    options.prefix  # "cmd_"
    args            # ["extract", "x.sh"]
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from .base import InvalidOptionError

# Anything else, "--" on its own included, is a positional argument
_OPTION_START = re.compile(r"--[a-zA-Z0-9]")

# --key or --key=value; key starts alphanumeric, then [-_a-zA-Z0-9]
_OPTION =re.compile(r"--([a-zA-Z0-9][-_a-zA-Z0-9]*)(?:=(.*))?", re.DOTALL)


class CliOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    help: bool = False
    verbose: bool = False
    file: Optional[Path] = None
    prefix: str = ""


def parse_cli_options(argv: List[str]) -> Tuple[CliOptions, List[str]]:
    """
    Split arguments into options and positional arguments.

    Args:
        argv: Arguments without the program name

    Returns:
        (options, positional arguments in their original order)

    Raises:
        InvalidOptionError: On malformed syntax, unknown keys, or values that
            do not fit the option's type.
    """
    values: Dict[str, Any] = {}
    positional: List[str] = []

    for arg in argv:
        if not _OPTION_START.match(arg):
            positional.append(arg)
            continue

        match = _OPTION.fullmatch(arg)
        if not match:
            raise InvalidOptionError(f"Invalid argument format: {arg}")

        key, value = match.groups()
        field = key.replace("-", "_").lower()
        if field not in CliOptions.model_fields:
            raise InvalidOptionError(f"Unknown option: --{key}")
        values[field] = True if value is None else value

    try:
        options = CliOptions(**values)
    except ValidationError as e:
        errors = "; ".join(
            f"--{err['loc'][0]}: {err['msg']}" for err in e.errors() if err["loc"]
        )
        raise InvalidOptionError(errors or str(e)) from e

    return options, positional
